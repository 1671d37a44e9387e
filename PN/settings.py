# PN/PN/settings.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: PN/PN/settings.py
# Назначение: глобальные настройки проекта Django + настройки контрола пагинации
# Принципы: всё переменное берём из .env, тулбар подключаем только при DEBUG
# ─────────────────────────────────────────────────────────────────────────────

from pathlib import Path  # стандартный модуль для работы с путями (Path-объект)
import os                 # модуль для чтения переменных окружения
from dotenv import load_dotenv  # загрузка значений из .env

# BASE_DIR: корень проекта (папка с manage.py)
BASE_DIR = Path(__file__).resolve().parent.parent

# ── Быстрая стартовая секция (важное для безопасности) ───────────────────────

# Подгружаем файл окружения .env, расположенный в корне проекта
load_dotenv(BASE_DIR / ".env")

# Секретный ключ берём из переменной окружения KEY_DJ
SECRET_KEY = os.getenv("KEY_DJ")

# Если ключ не найден, сразу падаем с понятной ошибкой: без него запуск небезопасен
if not SECRET_KEY:
    raise ValueError("SECRET_KEY не найден в .env! Установите KEY_DJ.")

# Флаг режима разработки. В продакшене DJANGO_DEBUG=0.
DEBUG = os.getenv("DJANGO_DEBUG", "1") == "1"

# Список разрешённых хостов через запятую. В Dev можно оставить пустым.
ALLOWED_HOSTS: list[str] = [h for h in os.getenv("DJANGO_ALLOWED_HOSTS", "").split(",") if h]

# ── Приложения проекта ───────────────────────────────────────────────────────

INSTALLED_APPS = [
    "django.contrib.admin",            # админка Django
    "django.contrib.auth",             # система аутентификации
    "django.contrib.contenttypes",     # контент-тайпы
    "django.contrib.sessions",         # сессии
    "django.contrib.messages",         # сообщения (flash-сообщения)
    "django.contrib.staticfiles",      # работа со статикой
    "rest_framework",                  # DRF: API фреймворк
    "pagenav",                         # контрол пагинации
    # "debug_toolbar" подключим ниже условно, чтобы в проде не торчал
]

# Опциональный флажок для быстрой деактивации тулбара даже при DEBUG=True
ENABLE_DEBUG_TOOLBAR = os.getenv("ENABLE_DEBUG_TOOLBAR", "1") == "1"

if DEBUG and ENABLE_DEBUG_TOOLBAR:
    INSTALLED_APPS += ["debug_toolbar"]

# ── Middleware ───────────────────────────────────────────────────────────────

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",        # базовая безопасность
    "django.contrib.sessions.middleware.SessionMiddleware", # поддержка сессий
    "django.middleware.common.CommonMiddleware",            # общие улучшения
    "django.middleware.csrf.CsrfViewMiddleware",            # защита от CSRF
    "django.contrib.auth.middleware.AuthenticationMiddleware",  # аутентификация пользователя
    "django.contrib.messages.middleware.MessageMiddleware",     # флеш-сообщения
    "django.middleware.clickjacking.XFrameOptionsMiddleware",   # защита от clickjacking
]

# Если тулбар включён, вставляем его middleware сразу после SecurityMiddleware
if DEBUG and ENABLE_DEBUG_TOOLBAR:
    _sec_idx = MIDDLEWARE.index("django.middleware.security.SecurityMiddleware")
    MIDDLEWARE.insert(_sec_idx + 1, "debug_toolbar.middleware.DebugToolbarMiddleware")
    INTERNAL_IPS = ["127.0.0.1", "localhost", "::1"]
    DEBUG_TOOLBAR_CONFIG = {
        "SHOW_COLLAPSED": True,  # панели свёрнуты по умолчанию
    }

# ── Урлы и WSGI ──────────────────────────────────────────────────────────────

ROOT_URLCONF = "PN.urls"              # корневой файл с маршрутами

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [BASE_DIR / "templates"],  # папка с шаблонами проекта (base.html)
        "APP_DIRS": True,                  # поиск шаблонов в приложениях
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",  # request нужен тегу {% pagination %}
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

WSGI_APPLICATION = "PN.wsgi.application"  # точка входа WSGI-сервера

# ── База данных ──────────────────────────────────────────────────────────────
# Своих моделей у pagenav нет; SQLite нужна только встроенным приложениям Django.
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}

# ── Локализация и часовой пояс ──────────────────────────────────────────────

LANGUAGE_CODE = "ru-ru"
TIME_ZONE = "Europe/Moscow"
USE_I18N = True
USE_TZ = True

# ── Статика ─────────────────────────────────────────────────────────────────

STATIC_URL = "static/"

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# ── DRF ──────────────────────────────────────────────────────────────────────
REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
        "rest_framework.renderers.BrowsableAPIRenderer",  # удобно при разработке
    ],
}

# ── Контрол пагинации ───────────────────────────────────────────────────────
# padding: сколько номеров показывать слева/справа от текущей страницы.
# THEME: переопределение CSS-классов (ключи как у PaginationTheme), по умолчанию пусто.
PAGENAV = {
    "PADDING": int(os.getenv("PAGENAV_PADDING", "3")),
    "SHOW_FIRST": os.getenv("PAGENAV_SHOW_FIRST", "1") == "1",
    "SHOW_LAST": os.getenv("PAGENAV_SHOW_LAST", "0") == "1",
    "THEME": {},
}

# Сколько строк в демо-списке результатов на главной
PAGENAV_DEMO_ITEMS = int(os.getenv("PAGENAV_DEMO_ITEMS", "137"))

# ── Логирование ─────────────────────────────────────────────────────────────
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "pagenav": {
            "handlers": ["console"],
            "level": os.getenv("PAGENAV_LOG_LEVEL", "INFO"),
        },
    },
}
