from pydantic import BaseModel


class FileUploadOut(BaseModel):
    filename: str
    size_bytes: int
    content_type: str
