import mimetypes
from pathlib import Path

import aiofiles
from pydantic import BaseModel, ConfigDict

from bluebubbles.base.node import BlueBubblesException


class Attachment(BaseModel):
    model_config = ConfigDict(strict=True)
    path: str|None = None
    content: bytes|None = None
    filename: str|None = None
    mime_type: str|None = None

    @property
    def name(self) -> str:
        if self.filename:
            return self.filename
        if self.path:
            return Path(self.path).name
        return "attachment"

    @property
    def content_type(self) -> str:
        if self.mime_type:
            return self.mime_type
        guessed, _ = mimetypes.guess_type(self.name)
        return guessed or "application/octet-stream"

    async def read(self) -> bytes:
        if self.content is not None:
            return self.content
        if self.path is None:
            raise BlueBubblesException("attachment needs either content or path")
        try:
            async with aiofiles.open(self.path, "rb") as f:
                return await f.read()
        except OSError as e:
            raise BlueBubblesException(f"cannot read attachment {self.path}: {e.strerror}") from e
