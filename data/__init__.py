"""数据持久化模块"""
from .store import SessionStore

__all__ = ['SessionStore']
