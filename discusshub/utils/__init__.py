from .map_to_dict import (
    map_user_to_public,
    map_user_to_author,
    map_user_to_summary,
    map_comment_to_public,
    map_reply_to_public,
    map_post_to_public,
    map_message_to_public
)
from .object_id import parse_object_id, require_text
