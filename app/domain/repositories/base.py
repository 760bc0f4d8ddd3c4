"""Repository 기본 인터페이스"""
from abc import ABC, abstractmethod
from typing import Generic, TypeVar, List, Optional

T = TypeVar('T')


class BaseRepository(ABC, Generic[T]):
    """Repository 기본 인터페이스"""

    @abstractmethod
    def get_by_id(self, id: str) -> Optional[T]:
        """ID로 엔티티 조회"""
        pass

    @abstractmethod
    def get_all(self) -> List[T]:
        """모든 엔티티 조회"""
        pass

    @abstractmethod
    def save(self, entity: T) -> T:
        """엔티티 저장 (같은 ID가 있으면 덮어쓰기)"""
        pass

    @abstractmethod
    def delete(self, entity: T) -> None:
        """엔티티 삭제"""
        pass
