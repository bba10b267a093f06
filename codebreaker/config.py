import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Upper bounds for new games; larger requests are clamped. 0 disables.
    MAX_CODE_LENGTH = int(os.environ.get('MAX_CODE_LENGTH', '12'))
    MAX_COLORS = int(os.environ.get('MAX_COLORS', '10'))
    MAX_ATTEMPTS = int(os.environ.get('MAX_ATTEMPTS', '50'))
    # Comma separated frontend origins allowed by CORS and Socket.IO
    CORS_ORIGINS = [
        o.strip() for o in os.environ.get(
            'CORS_ORIGINS',
            'http://localhost:5173,http://127.0.0.1:5173,http://localhost:8080,http://127.0.0.1:8080',
        ).split(',') if o.strip()
    ]
