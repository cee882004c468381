from pydantic import BaseModel


class PostSummary(BaseModel):
    title: str
    date: str
    fileName: str


class Post(PostSummary):
    author: str = ""
    contentHtml: str
