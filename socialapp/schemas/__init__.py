from .user import (
	AuthorSummary,
	SessionUser,
)
from .comment import (
	CommentCreate,
	CommentRead,
)
from .post import (
	PostCreate,
	PostRead,
	LikeRef,
	FeedCounts,
	FeedPost,
)
from .notification import (
	NotificationResponse,
	MarkReadRequest,
	MarkReadResponse,
)
from .result import (
	ActionResult,
	ErrorKind,
)

__all__ = [
	# User
	"AuthorSummary",
	"SessionUser",
	# Comment
	"CommentCreate",
	"CommentRead",
	# Post
	"PostCreate",
	"PostRead",
	"LikeRef",
	"FeedCounts",
	"FeedPost",
	# Notification
	"NotificationResponse",
	"MarkReadRequest",
	"MarkReadResponse",
	# Result envelope
	"ActionResult",
	"ErrorKind",
]
