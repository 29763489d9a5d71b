from .user import User
from .post import Post, DEFAULT_CATEGORY
from .comment import Comment, Reply
from .message import Message
from .database import init_db
