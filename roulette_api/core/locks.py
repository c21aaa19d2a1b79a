"""
Locks por chave para serializar escritas de saldo de um mesmo usuário
"""
import threading
from contextlib import contextmanager
from typing import Dict, Hashable, Iterator, List


class KeyedLock:
    """
    Mantém um lock por chave, criado sob demanda e descartado quando
    ninguém mais o está usando. Reentrante na mesma thread.
    """

    def __init__(self):
        self._guard = threading.Lock()
        # chave -> [lock, quantidade de threads usando/esperando]
        self._locks: Dict[Hashable, List] = {}

    @contextmanager
    def hold(self, key: Hashable) -> Iterator[None]:
        with self._guard:
            entry = self._locks.setdefault(key, [threading.RLock(), 0])
            entry[1] += 1
        lock = entry[0]
        lock.acquire()
        try:
            yield
        finally:
            lock.release()
            with self._guard:
                entry[1] -= 1
                if entry[1] == 0:
                    del self._locks[key]

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)


balance_locks = KeyedLock()
