"""Quick start example for the Stream SDK.

This example demonstrates how to:
1. Create a client from explicit credentials or the environment
2. Create users, a channel and a message
3. Read fields from response envelopes
4. Handle API errors
"""

import getstream
from getstream import APIError, LoggingConfig, StreamClient, StreamConfig, setup_logging
from getstream.models import (
    AddActivityRequest,
    ChannelGetOrCreateRequest,
    ChannelInput,
    ChannelMember,
    MessageRequest,
    SendMessageRequest,
    UpdateUsersRequest,
    UserRequest,
)


def example_chat():
    """Example: Users, channels and messages."""
    config = StreamConfig.manual(api_key="YOUR_API_KEY", api_secret="YOUR_API_SECRET")

    with StreamClient(config) as client:
        print("Creating users...")
        client.common.update_users(
            UpdateUsersRequest(
                users={
                    "john": UserRequest(id="john", name="John"),
                    "jane": UserRequest(id="jane", name="Jane"),
                }
            )
        )

        print("Creating channel...")
        resp = client.chat.get_or_create_channel(
            "messaging",
            "general",
            ChannelGetOrCreateRequest(
                data=ChannelInput(
                    created_by_id="john",
                    members=[ChannelMember(user_id="john"), ChannelMember(user_id="jane")],
                )
            ),
        )
        print(f"Channel: {resp.channel.cid}")

        print("Sending message...")
        resp = client.chat.send_message(
            "messaging",
            "general",
            SendMessageRequest(message=MessageRequest(text="Hello from Python!", user_id="john")),
        )
        print(f"Message id: {resp.message.id}")

        # Client-side token for the chat frontend
        print(f"Token for jane: {client.create_token('jane', expires_in=3600)}")


def example_feeds_from_env():
    """Example: Shared client from STREAM_API_KEY / STREAM_API_SECRET."""
    setup_logging(LoggingConfig(level="DEBUG"))
    client = getstream.env()

    client.feed("user", "john").get_or_create_feed()
    resp = client.feeds.add_activity(
        AddActivityRequest(type="post", feeds=["user:john"], text="First post!", user_id="john")
    )
    print(f"Activity id: {resp.activity.id}")


def example_errors():
    """Example: Exceptions and the non-raising variant."""
    client = getstream.manual(api_key="YOUR_API_KEY", api_secret="YOUR_API_SECRET")

    try:
        client.chat.get_message("does-not-exist")
    except APIError as exc:
        print(f"Request failed ({exc.status_code}): {exc.message}")

    result = client.try_send("GET", "/api/v2/chat/messages/does-not-exist")
    if not result.success:
        print(f"try_send error: {result.error.to_dict()}")

    client.close()


if __name__ == "__main__":
    print("Stream SDK - Quick Start Examples")
    print("=" * 50)
    print()
    print("Available examples:")
    print("1. Chat: users, channels and messages")
    print("2. Feeds with a client from the environment")
    print("3. Error handling")
    print()

    choice = input("Enter example number (1-3) or 'q' to quit: ")

    if choice == "1":
        example_chat()
    elif choice == "2":
        example_feeds_from_env()
    elif choice == "3":
        example_errors()
    elif choice.lower() == "q":
        print("Goodbye!")
    else:
        print("Invalid choice!")
