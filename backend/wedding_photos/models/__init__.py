from .event import Event
from .photo import Photo
from .like import Like, LikeToggle
from .comment import Comment
from .album_order import AlbumOrder, OrderStatus
from .stats import EventStats
