# routers/settings.py
from fastapi import APIRouter, Depends

from config_store import ConfigStore, get_config_store
from finder import SETTINGS_PATH
from models import ApiKeyIn, SettingsForm, SettingsSaved

router = APIRouter(prefix=SETTINGS_PATH, tags=["settings"])

DHL_SIGNUP_URL = "https://developer.dhl.com/user/login?action=create-app"

@router.get("", response_model=SettingsForm)
async def get_settings(config: ConfigStore = Depends(get_config_store)):
    return SettingsForm(
        api_key=await config.get("api_key"),
        description=f"API key from DHL. If you dont have an api key please visit DHL ({DHL_SIGNUP_URL}) to get your api key.",
    )

@router.put("", response_model=SettingsSaved)
async def save_settings(body: ApiKeyIn, config: ConfigStore = Depends(get_config_store)):
    await config.set("api_key", body.api_key)
    return SettingsSaved(message="The configuration options have been saved.", api_key=body.api_key)
