"""
process-wide settings for funqy.

defaults come from the environment at import time and can be replaced at
runtime with `configure()`.
"""
import logging
import os
from dataclasses import dataclass, replace, asdict
from typing import Optional

logger = logging.getLogger(__name__)

MEMO_POLICIES = ('unbounded', 'weak', 'lru')


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None: return default
    return raw.strip().lower() in ('1', 'true', 'yes', 'on')


@dataclass(frozen=True)
class FunqyConfig:
    """runtime knobs for funqy"""
    memo_policy: str = 'unbounded'  # unbounded, weak, lru
    memo_maxsize: int = 128
    use_numpy: bool = True
    log_level: Optional[str] = None

    def validate(self) -> 'FunqyConfig':
        if self.memo_policy not in MEMO_POLICIES:
            raise ValueError(f"unknown memo policy '{self.memo_policy}', expected one of {MEMO_POLICIES}")
        if self.memo_maxsize <= 0:
            raise ValueError("memo_maxsize must be positive")
        if self.log_level is not None and not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"unknown log level '{self.log_level}'")
        return self

    @classmethod
    def from_env(cls) -> 'FunqyConfig':
        return cls(
            memo_policy=os.getenv('FUNQY_MEMO_POLICY', cls.memo_policy),
            memo_maxsize=int(os.getenv('FUNQY_MEMO_MAXSIZE', cls.memo_maxsize)),
            use_numpy=_env_bool('FUNQY_USE_NUMPY', cls.use_numpy),
            log_level=os.getenv('FUNQY_LOG_LEVEL'),
        ).validate()


_config = FunqyConfig.from_env()


def _apply_log_level(config: FunqyConfig) -> None:
    if config.log_level:
        logging.getLogger('funqy').setLevel(config.log_level.upper())


def get_config() -> FunqyConfig:
    """current process config"""
    return _config


def configure(**overrides) -> FunqyConfig:
    """replace fields of the process config and return the new config"""
    global _config
    _config = replace(_config, **overrides).validate()
    _apply_log_level(_config)
    logger.debug(f"config updated: {asdict(_config)}")
    return _config


_apply_log_level(_config)
