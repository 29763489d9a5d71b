from enum import Enum
from typing import Optional


class DeleteGrant(str, Enum):
    """Lý do một người dùng được phép xóa bình luận/phản hồi."""
    REPLY_AUTHOR = "reply_author"
    COMMENT_AUTHOR = "comment_author"
    POST_AUTHOR = "post_author"


def resolve_delete_grant(
    acting_user_id: str,
    post_author_id: str,
    comment_author_id: str,
    reply_author_id: Optional[str] = None,
) -> Optional[DeleteGrant]:
    """
    Kiểm tra quyền xóa theo thứ tự tác giả phản hồi -> tác giả bình luận -> tác giả bài đăng.

    Trả về lý do đầu tiên khớp, hoặc None nếu người dùng không có quyền.
    Khi xóa bình luận thì không truyền reply_author_id.
    """
    ladder = []
    if reply_author_id is not None:
        ladder.append((DeleteGrant.REPLY_AUTHOR, reply_author_id))
    ladder.append((DeleteGrant.COMMENT_AUTHOR, comment_author_id))
    ladder.append((DeleteGrant.POST_AUTHOR, post_author_id))

    for grant, owner_id in ladder:
        if owner_id == acting_user_id:
            return grant
    return None
