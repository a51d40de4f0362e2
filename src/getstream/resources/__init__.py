"""Resource groups exposed on :class:`getstream.StreamClient`.

Each group is a thin wrapper that builds a path and body and hands them to
``StreamClient.make_request``. Errors propagate unchanged.
"""

from .base import ResourceClient
from .chat import ChatClient
from .common import CommonClient
from .feed import Feed, FeedResource
from .feeds import FeedsClient
from .moderation import ModerationClient
from .video import VideoClient

__all__ = [
    "ChatClient",
    "CommonClient",
    "Feed",
    "FeedResource",
    "FeedsClient",
    "ModerationClient",
    "ResourceClient",
    "VideoClient",
]
