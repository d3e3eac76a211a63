# models/__init__.py
from .base import Base
from .users import Users
from .inspections import Inspection
from .detections import Detection
from .datasheets import Datasheet
from .system_settings import SystemSetting
