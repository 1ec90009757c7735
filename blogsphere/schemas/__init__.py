from blogsphere.schemas.records import (
    IsoDateTime,
    UserRecordSchema,
    PostRecordSchema,
    CommentRecordSchema,
)

__all__ = [
    "IsoDateTime",
    "UserRecordSchema",
    "PostRecordSchema",
    "CommentRecordSchema",
]
