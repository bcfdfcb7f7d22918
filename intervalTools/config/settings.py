"""
Library-wide defaults, read from INTERVALTOOLS_* environment variables

eg
    INTERVALTOOLS_HIGHINCLUSIVE=true
makes asInterval((1,5)) give [1,5] rather than [1,5)
"""
import typing

from pydantic_settings import BaseSettings,SettingsConfigDict


class IntervalSettings(BaseSettings):
    """
    Defaults for intervalTools

    :lowInclusive: whether asInterval((low,high)) includes low
    :highInclusive: whether asInterval((low,high)) includes high
    :verbose: configureLogging() emits DEBUG output
    :logJson: configureLogging() renders JSON lines instead of console output
    """
    model_config=SettingsConfigDict(env_prefix="INTERVALTOOLS_",frozen=True)

    lowInclusive:bool=True
    highInclusive:bool=False
    verbose:bool=False
    logJson:bool=False


_settings:typing.Optional[IntervalSettings]=None


def getSettings()->IntervalSettings:
    """
    The current settings (read from the environment on first use)
    """
    global _settings
    if _settings is None:
        _settings=IntervalSettings()
    return _settings


def resetSettings(settings:typing.Optional[IntervalSettings]=None)->None:
    """
    Replace the current settings

    If settings is None, they will be re-read from the environment
    on next use.
    """
    global _settings
    _settings=settings
