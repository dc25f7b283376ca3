import os


class Config:
    APP_ENV = os.getenv('APP_ENV', 'development')
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev_secret_key')
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URI', 'sqlite:///tasks.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    JWT_SECRET = os.getenv('JWT_SECRET', 'fallback-secret-key')
    JWT_ALGORITHM = os.getenv('JWT_ALGORITHM', 'HS256')
    JWT_EXPIRES_IN = os.getenv('JWT_EXPIRES_IN', '7d')
    TOKEN_COOKIE_NAME = 'token'

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    API_VERSION = os.getenv('API_VERSION', '1.0.0')
