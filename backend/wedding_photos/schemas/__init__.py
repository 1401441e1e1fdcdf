from .event import Event, EventCreate, EventCreated, EventUpdate
from .photo import Photo, PhotoCreate, PhotoUpdate
from .like import Like, LikeRequest, LikeToggle
from .comment import Comment, CommentBase, CommentCreate
from .album_order import AlbumOrder, AlbumOrderBase, AlbumOrderCreate, AlbumOrderUpdate
from .stats import EventStats
