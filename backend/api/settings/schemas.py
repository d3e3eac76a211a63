from datetime import datetime
from typing import Annotated, List, Literal, Optional, Union
from pydantic import BaseModel, Field, TypeAdapter, field_validator, model_validator
from core.roster import check_unique, normalize_camera
from core.verdicts import check_thresholds

THRESHOLDS_KEY = "thresholds"
CAMERA_CONFIG_KEY = "camera_config"


class Thresholds(BaseModel):
    genuine: float = Field(..., ge=0, le=1)
    suspicious: float = Field(..., ge=0, le=1)

    @model_validator(mode="after")
    def check_order(self):
        check_thresholds(self.genuine, self.suspicious)
        return self


class CameraConfig(BaseModel):
    cameras: List[str] = []

    @field_validator("cameras")
    @classmethod
    def cameras_unique(cls, cameras):
        return check_unique(cameras)


class CameraAdd(BaseModel):
    camera: str

    @field_validator("camera")
    @classmethod
    def camera_not_blank(cls, camera):
        return normalize_camera(camera)


# system_settings rows, one shape per setting_key
class ThresholdsSetting(BaseModel):
    setting_key: Literal["thresholds"]
    setting_value: Thresholds
    updated_at: Optional[datetime] = None


class CameraConfigSetting(BaseModel):
    setting_key: Literal["camera_config"]
    setting_value: CameraConfig
    updated_at: Optional[datetime] = None


SystemSettingSchema = Annotated[
    Union[ThresholdsSetting, CameraConfigSetting],
    Field(discriminator="setting_key"),
]

system_setting_adapter = TypeAdapter(SystemSettingSchema)


class SettingsResponse(BaseModel):
    thresholds: Thresholds
    camera_config: CameraConfig
