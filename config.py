import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Comma-separated list of origins allowed to call /api/*
    CORS_ORIGINS = [
        origin.strip()
        for origin in os.environ.get('CORS_ORIGINS', 'http://localhost:3000').split(',')
        if origin.strip()
    ]
    # Listener for run.py
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', '8080'))
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()
