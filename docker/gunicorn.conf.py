# PN/docker/gunicorn.conf.py
# ─────────────────────────────────────────────────────────────────────────────
# Назначение: конфигурация gunicorn для Django-проекта PN
# Запуск: gunicorn -c docker/gunicorn.conf.py PN.wsgi:application
# ─────────────────────────────────────────────────────────────────────────────

import multiprocessing  # модуль для определения числа CPU
import os

bind = os.getenv("GUNICORN_BIND", "unix:/run/gunicorn/pn.sock")  # unix-сокет для nginx
workers = int(os.getenv("GUNICORN_WORKERS", multiprocessing.cpu_count() * 2 + 1))  # число воркеров
timeout = int(os.getenv("GUNICORN_TIMEOUT", "60"))  # таймаут воркера
accesslog = "-"  # лог запросов в stdout
errorlog = "-"   # лог ошибок в stdout
loglevel = os.getenv("GUNICORN_LOG_LEVEL", "info")
worker_class = "sync"  # обычный sync-воркер
