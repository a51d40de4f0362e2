"""Generated request/response models for the Stream API."""

from .base import StreamModel, to_json_value
from .chat import (
    Attachment,
    ChannelGetOrCreateRequest,
    ChannelInput,
    ChannelMember,
    HideChannelRequest,
    MarkReadRequest,
    MessageRequest,
    ReactionRequest,
    SearchPayload,
    SendMessageRequest,
    SendReactionRequest,
    ShowChannelRequest,
    TruncateChannelRequest,
    UpdateChannelRequest,
    UpdateMessageRequest,
)
from .common import (
    BlockUsersRequest,
    CreateBlockListRequest,
    CreateGuestRequest,
    CreatePollRequest,
    DeactivateUserRequest,
    DeleteUsersRequest,
    FileUploadRequest,
    ImageSize,
    ImageUploadRequest,
    OnlyUserID,
    PollOptionInput,
    QueryPollsRequest,
    QueryUsersPayload,
    ReactivateUserRequest,
    UnblockUsersRequest,
    UpdateBlockListRequest,
    UpdateUserPartialRequest,
    UpdateUsersPartialRequest,
    UpdateUsersRequest,
    UserRequest,
)
from .feeds import (
    AddActivityRequest,
    AddCommentRequest,
    AddReactionRequest,
    FollowRequest,
    GetOrCreateFeedRequest,
    QueryActivitiesRequest,
    UpdateActivityRequest,
)
from .moderation import (
    BanRequest,
    CheckRequest,
    FlagRequest,
    ModerationPayload,
    MuteRequest,
    UnbanRequest,
    UnmuteRequest,
)
from .video import CallMember, CallRequest, GetOrCreateCallRequest

__all__ = [
    "StreamModel",
    "to_json_value",
    # Common
    "BlockUsersRequest",
    "CreateBlockListRequest",
    "CreateGuestRequest",
    "CreatePollRequest",
    "DeactivateUserRequest",
    "DeleteUsersRequest",
    "FileUploadRequest",
    "ImageSize",
    "ImageUploadRequest",
    "OnlyUserID",
    "PollOptionInput",
    "QueryPollsRequest",
    "QueryUsersPayload",
    "ReactivateUserRequest",
    "UnblockUsersRequest",
    "UpdateBlockListRequest",
    "UpdateUserPartialRequest",
    "UpdateUsersPartialRequest",
    "UpdateUsersRequest",
    "UserRequest",
    # Chat
    "Attachment",
    "ChannelGetOrCreateRequest",
    "ChannelInput",
    "ChannelMember",
    "HideChannelRequest",
    "MarkReadRequest",
    "MessageRequest",
    "ReactionRequest",
    "SearchPayload",
    "SendMessageRequest",
    "SendReactionRequest",
    "ShowChannelRequest",
    "TruncateChannelRequest",
    "UpdateChannelRequest",
    "UpdateMessageRequest",
    # Feeds
    "AddActivityRequest",
    "AddCommentRequest",
    "AddReactionRequest",
    "FollowRequest",
    "GetOrCreateFeedRequest",
    "QueryActivitiesRequest",
    "UpdateActivityRequest",
    # Moderation
    "BanRequest",
    "CheckRequest",
    "FlagRequest",
    "ModerationPayload",
    "MuteRequest",
    "UnbanRequest",
    "UnmuteRequest",
    # Video
    "CallMember",
    "CallRequest",
    "GetOrCreateCallRequest",
]
