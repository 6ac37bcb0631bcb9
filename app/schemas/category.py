from typing import List, Union
from pydantic import BaseModel


class CategoryBase(BaseModel):
    name: str
    icon: str = "📦"
    color: str = "#6b7280"
    keywords: Union[str, List[str]] = "[]"
    is_active: str = "true"


class CategoryCreate(CategoryBase):
    pass
