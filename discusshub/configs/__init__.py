import os
from dotenv import load_dotenv

# Tải các biến môi trường từ tệp .env
load_dotenv()

MONGO_URI = os.getenv("MONGO_URI")
DATABASE_NAME = os.getenv("DATABASE_NAME", "discusshub")

# Cấu hình JWT
SECRET_KEY = os.getenv("SECRET_KEY")
ALGORITHM = os.getenv("ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", 120))

ENVIRONMENT = os.getenv("ENVIRONMENT", "development")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Danh sách origin được phép gọi API, phân tách bằng dấu phẩy
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv(
        "CORS_ORIGINS",
        "http://localhost:5173,http://127.0.0.1:5173,http://localhost:3000"
    ).split(",")
    if origin.strip()
]


def is_production() -> bool:
    """Chi tiết lỗi nội bộ chỉ được ẩn khi chạy ở môi trường production."""
    return ENVIRONMENT.lower() == "production"


def require_secret_key() -> str:
    """Trả về khóa ký JWT; thiếu hoặc rỗng thì dừng lại thay vì ký bằng chuỗi rỗng."""
    if not SECRET_KEY or not SECRET_KEY.strip():
        raise ValueError("SECRET_KEY is not set in the environment.")
    return SECRET_KEY
