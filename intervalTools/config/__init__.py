"""
Settings and logging setup for intervalTools
"""
from intervalTools.config.settings import IntervalSettings,getSettings,resetSettings
from intervalTools.config.logging import configureLogging
