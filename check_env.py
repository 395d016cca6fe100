from app.config import Settings
from app.probe import describe_target

settings = Settings.from_env()

# URL 中的密码同样隐藏
print("DB_URL:", describe_target(settings))
print("DB_USERNAME:", settings.DB_USERNAME)
print("DB_PASSWORD:", "***" if settings.DB_PASSWORD else "")
print("PORT:", settings.PORT)
