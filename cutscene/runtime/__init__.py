# cutscene/runtime/__init__.py
from .player import PlayerConfig, ScriptPlayer
from .triggers import all_routines, get_routine, register_routine, trigger_routine
