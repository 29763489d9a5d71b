from typing import Dict, Iterable, List
from beanie import PydanticObjectId
from ..models import Message, Post, User
from ..schemas import MessagePublic, PostPublic
from ..utils import map_message_to_public, map_post_to_public


async def load_users_by_id(user_ids: Iterable[str]) -> Dict[str, User]:
    """
    Lấy các người dùng được tham chiếu bằng một truy vấn $in duy nhất.
    Id sai định dạng bị bỏ qua và sẽ được hiển thị là null.
    """
    object_ids = {PydanticObjectId(uid) for uid in user_ids if uid and PydanticObjectId.is_valid(uid)}
    if not object_ids:
        return {}
    users = await User.find({"_id": {"$in": list(object_ids)}}).to_list()
    return {str(user.id): user for user in users}


def collect_post_user_ids(post: Post) -> set:
    user_ids = {post.authorId}
    for comment in post.comments or []:
        user_ids.add(comment.authorId)
        user_ids.update(reply.authorId for reply in comment.replies)
    return user_ids


async def hydrate_posts(posts: List[Post]) -> List[PostPublic]:
    """Thay id tác giả bài đăng, bình luận và phản hồi bằng thông tin hiển thị."""
    user_ids = set()
    for post in posts:
        user_ids.update(collect_post_user_ids(post))
    users_by_id = await load_users_by_id(user_ids)
    return [map_post_to_public(post, users_by_id) for post in posts]


async def hydrate_post(post: Post) -> PostPublic:
    return (await hydrate_posts([post]))[0]


async def hydrate_messages(messages: List[Message]) -> List[MessagePublic]:
    user_ids = set()
    for msg in messages:
        user_ids.update((msg.senderId, msg.recipientId))
    users_by_id = await load_users_by_id(user_ids)
    return [map_message_to_public(msg, users_by_id) for msg in messages]


async def hydrate_message(message: Message) -> MessagePublic:
    return (await hydrate_messages([message]))[0]
