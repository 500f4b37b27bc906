import os

os.environ.setdefault("VIM_TEXTAREA_DISABLE_CONSOLE", "1")
