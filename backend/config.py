import os

BACKEND_ROOT = os.path.dirname(os.path.abspath(__file__))


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', '3000'))
    # Comma separated; '*' allows any origin
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')
    # Front-end assets (index.html and friends)
    STATIC_DIR = os.environ.get('STATIC_DIR') or os.path.join(os.path.dirname(BACKEND_ROOT), 'public')
    # Leaderboard sizing
    LEADERBOARD_MAX_ENTRIES = int(os.environ.get('LEADERBOARD_MAX_ENTRIES', '100'))
    LEADERBOARD_TOP_N = int(os.environ.get('LEADERBOARD_TOP_N', '10'))
    # Periodic status log interval (sec). 0 disables.
    STATUS_LOG_INTERVAL_SEC = int(os.environ.get('STATUS_LOG_INTERVAL_SEC', '300'))
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
