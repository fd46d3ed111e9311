from src.domain.entities.category import Category
from src.domain.entities.page import Page

__all__ = ["Category", "Page"]
