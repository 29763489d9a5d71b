import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from discusshub import configs
from discusshub.exceptions import AuthenticationError, ForumError
from discusshub.routers import auth_router, post_router, comment_router, message_router
from discusshub.models import init_db

logging.basicConfig(
    level=configs.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
logger = logging.getLogger(__name__)

# Khởi tạo app FastAPI với thông tin Swagger UI
app = FastAPI(
    title="DiscussHub",
    description="Backend diễn đàn thảo luận **DiscussHub**.\n\n"
                "Hệ thống hỗ trợ đăng ký, đăng nhập, đăng bài theo chuyên mục, "
                "bình luận và trả lời lồng nhau, cùng tin nhắn trực tiếp.",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=configs.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

@app.exception_handler(ForumError)
async def forum_error_handler(request: Request, exc: ForumError):
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthenticationError) else None
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.message},
        headers=headers
    )

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None)
    )

# Exception handler cho RequestValidationError (Pydantic validation)
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # Format lỗi validation cho user-friendly
    error_messages = []
    for error in exc.errors():
        field = " -> ".join(str(loc) for loc in error["loc"])
        message = error.get("msg", "Validation error")
        error_messages.append(f"{field}: {message}")

    detail = "; ".join(error_messages) if error_messages else "Invalid request data"

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": detail}
    )

@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    content = {"message": "Something went wrong!"}
    if not configs.is_production():
        content["error"] = str(exc)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content)

# Kiểm tra khóa ký JWT và kết nối cơ sở dữ liệu khi khởi động
@app.on_event("startup")
async def startup_db_client():
    configs.require_secret_key()
    await init_db()

# Gắn các router
app.include_router(auth_router.router, prefix="/api/auth", tags=["Xác thực"])
app.include_router(post_router.router, prefix="/api/posts", tags=["Bài viết"])
app.include_router(comment_router.router, prefix="/api/posts", tags=["Bình luận"])
app.include_router(message_router.router, prefix="/api/messages", tags=["Tin nhắn"])

@app.get("/")
def read_root():
    return {"status": "Server is running"}
