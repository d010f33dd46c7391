# app/adapters/outbound/cache/response_cache.py

"""
Cache de respostas de leitura.

Armazena as projeções {cnpj, nome} servidas pelas leituras. A expiração
fica a cargo do TTLCache; a consistência com o banco é garantida pelas
invalidações feitas após cada escrita confirmada.
"""

import copy
import logging
import threading
import time
from collections import OrderedDict
from typing import Any, Callable, Optional, Tuple

from cachetools import TTLCache

from app.application.ports.outbound import FillToken, IResponseCache
from app.domain.models.cache_keys import CacheKey

logger = logging.getLogger(__name__)


class ResponseCache(IResponseCache):
    """
    Cache chave/valor que descarta gravações obsoletas.

    Cada invalidação avança um relógio lógico e registra, para a chave,
    o valor do relógio e o instante. Uma leitura captura um FillToken
    (relógio, instante) antes de consultar o banco e só consegue gravar
    se a chave não foi invalidada depois disso.

    O registro de invalidações só guarda as de até 'fill_window' segundos
    atrás; gravações com token mais antigo que isso são descartadas, então
    um registro podado nunca é necessário e a memória fica limitada às
    chaves invalidadas dentro da janela.
    """

    def __init__(
            self,
            maxsize: int = 1024,
            ttl: float = 300,
            fill_window: float = 60,
            timer: Callable[[], float] = time.monotonic,
    ):
        self._entries: TTLCache = TTLCache(maxsize=maxsize, ttl=ttl, timer=timer)
        # chave -> (relógio, instante), em ordem de invalidação
        self._invalidations: "OrderedDict[CacheKey, Tuple[int, float]]" = OrderedDict()
        self._clock = 0
        self._fill_window = fill_window
        self._timer = timer
        self._lock = threading.RLock()

    def get(self, key: CacheKey) -> Optional[Any]:
        with self._lock:
            value = self._entries.get(key)
        if value is None:
            logger.debug(f"Cache miss: {key.render()}")
            return None
        logger.debug(f"Cache hit: {key.render()}")
        return copy.deepcopy(value)

    def set(self, key: CacheKey, value: Any, generation: Optional[FillToken] = None) -> bool:
        """
        Grava o valor. Se 'generation' for informada e a chave tiver sido
        invalidada desde então, ou o token for mais antigo que a janela de
        gravação, a gravação é descartada e retorna False.
        """
        with self._lock:
            if generation is not None and self._is_stale(key, generation):
                logger.debug(f"Discarding stale cache fill: {key.render()}")
                return False
            self._entries[key] = copy.deepcopy(value)
            return True

    def invalidate(self, key: CacheKey) -> None:
        with self._lock:
            now = self._timer()
            self._clock += 1
            self._invalidations.pop(key, None)
            self._invalidations[key] = (self._clock, now)
            self._entries.pop(key, None)
            self._prune(now)
        logger.debug(f"Cache invalidated: {key.render()}")

    def generation(self, key: CacheKey) -> FillToken:
        with self._lock:
            return self._clock, self._timer()

    def _is_stale(self, key: CacheKey, token: FillToken) -> bool:
        clock, taken_at = token
        if self._timer() - taken_at > self._fill_window:
            return True
        invalidated = self._invalidations.get(key)
        return invalidated is not None and invalidated[0] > clock

    def _prune(self, now: float) -> None:
        while self._invalidations:
            key, (_, at) = next(iter(self._invalidations.items()))
            if now - at <= self._fill_window:
                break
            del self._invalidations[key]

    def tracked_invalidations(self) -> int:
        with self._lock:
            return len(self._invalidations)

    def __contains__(self, key: CacheKey) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
