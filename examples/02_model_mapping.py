"""
Example 02: Model Mapping

This example demonstrates mapping storage rows to Python dataclasses and
Pydantic models through a MappingRegistry.
"""

from dataclasses import dataclass

from pydantic import BaseModel

from row_shape import MappingRegistry


@dataclass
class UserDataclass:
    """User model using dataclass"""
    userId: int
    fullName: str
    email: str


class VideoPydantic(BaseModel):
    """Video model using Pydantic"""
    VideoId: int
    Title: str
    ViewCount: str


def main():
    registry = MappingRegistry(
        {
            "models": {
                "users": {
                    "style": "underscore_to_camel_case",
                    "columns": {"user_email": "email"},
                },
                "videos": {
                    "style": "underscore_to_pascal_case",
                    "convert_big_integer_to_string": True,
                },
            }
        },
        target_classes={"users": UserDataclass, "videos": VideoPydantic},
    )

    print("=== Model Mapping ===\n")

    # Map to dataclass
    print("1. Dataclass Mapping:")
    users = registry.get("users")
    user = users.map_one({"user_id": 1, "full_name": "Alice", "user_email": "alice@example.com"})
    print(f"   Type: {type(user).__name__}")
    print(f"   Data: {user}")
    print(f"   Row:  {users.to_row(user)}\n")

    # Map to Pydantic model
    print("2. Pydantic Model Mapping:")
    videos = registry.get("videos")
    rows = [
        {"video_id": 1, "title": "Intro", "view_count": 2**62},
        {"video_id": 2, "title": "Setup", "view_count": 2**61},
    ]
    for video in videos.map_many(rows):
        print(f"   - {video.Title}: {video.ViewCount} views")
        print(f"     params = {videos.to_parameters(video)}")
    print()


if __name__ == "__main__":
    main()
