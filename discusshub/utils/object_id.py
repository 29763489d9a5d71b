from beanie import PydanticObjectId
from ..exceptions import InvalidInputError

def parse_object_id(value: str, label: str) -> PydanticObjectId:
    """Chuyển chuỗi id từ URL thành ObjectId, báo lỗi 400 nếu sai định dạng."""
    if not value or not PydanticObjectId.is_valid(value):
        raise InvalidInputError(f"Invalid {label} ID format")
    return PydanticObjectId(value)

def require_text(value: str, message: str) -> str:
    """Trả về chuỗi đã cắt khoảng trắng, báo lỗi 400 nếu rỗng."""
    if value is None or not value.strip():
        raise InvalidInputError(message)
    return value.strip()
