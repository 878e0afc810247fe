from dataclasses import dataclass
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


@dataclass
class Page(Generic[T]):
    page_size: int
    page_count: int
    total_elements: int
    total_pages: int
    content: list[T]

    @classmethod
    def of(cls, content: list[T], page_size: int, total_elements: int) -> "Page[T]":
        total_pages = (total_elements + page_size - 1) // page_size if total_elements > 0 else 0

        return cls(
            page_size=page_size,
            page_count=len(content),
            total_elements=total_elements,
            total_pages=total_pages,
            content=content,
        )

    def __iter__(self) -> Iterator[T]:
        return iter(self.content)

    def __len__(self) -> int:
        return len(self.content)
