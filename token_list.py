from typing import Iterable, List, Optional


class TokenList:
    """
    Ordered, de-duplicated list of short strings (tech stack, image urls,
    features...). Entries are compared after trimming; blanks are ignored.
    """

    def __init__(self, items: Optional[Iterable[str]] = None):
        self._items: List[str] = []
        for item in items or []:
            self.add(item)

    def add(self, value: Optional[str]) -> bool:
        token = (value or "").strip()
        if not token or token in self._items:
            return False
        self._items.append(token)
        return True

    def remove(self, value: Optional[str]) -> bool:
        token = (value or "").strip()
        if token not in self._items:
            return False
        self._items.remove(token)
        return True

    def to_list(self) -> List[str]:
        return list(self._items)

    def __contains__(self, value: object) -> bool:
        return isinstance(value, str) and value.strip() in self._items

    def __iter__(self):
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"TokenList({self._items!r})"


def clean_tokens(items: Optional[Iterable[str]]) -> List[str]:
    return TokenList(items).to_list()
