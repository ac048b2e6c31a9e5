import os

# ✅ Database
DB_HOST = os.getenv("DB_HOST", "localhost")
DB_PORT = int(os.getenv("DB_PORT", "3306"))
DB_USER = os.getenv("DB_USER", "TUANPHONG")
DB_PASSWORD = os.getenv("DB_PASSWORD", "123321")
DB_NAME = os.getenv("DB_NAME", "cvking_db")
DB_CONNECT_TIMEOUT = int(os.getenv("DB_CONNECT_TIMEOUT", "5"))

DATABASE_URL = os.getenv(
    "DATABASE_URL",
    f"mysql+pymysql://{DB_USER}:{DB_PASSWORD}@{DB_HOST}:{DB_PORT}/{DB_NAME}",
)

# ✅ CVKing REST API
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:3001")
API_TIMEOUT = float(os.getenv("API_TIMEOUT", "10"))

# ✅ Uploads
UPLOAD_MAX_SIZE_MB = float(os.getenv("UPLOAD_MAX_SIZE_MB", "5"))

# ✅ Seed accounts
SEED_PASSWORD = os.getenv("SEED_PASSWORD", "123321")
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "12"))

# ✅ Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
