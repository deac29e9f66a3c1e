# 日志输出模块：控制台日志
#
# 主要功能：
#   - log_info() / log_success() / log_warning()：输出到 stdout
#   - log_error()：输出到 stderr
#
# 特性：
#   - 带时间戳
#   - 终端支持时彩色输出（Windows 由 colorama 开启 ANSI 支持）
#
# 本模块自身即可作为 logger 对象传入各组件（任何带有这四个函数的对象都可以）。

import sys
from datetime import datetime
from typing import TextIO

import colorama

colorama.just_fix_windows_console()

COLOR_RESET = '\033[0m'
COLOR_INFO = '\033[0;36m'      # 青色
COLOR_SUCCESS = '\033[0;32m'   # 绿色
COLOR_ERROR = '\033[0;31m'     # 红色
COLOR_WARNING = '\033[0;33m'   # 黄色


def _get_timestamp() -> str:
    return datetime.now().strftime('%Y-%m-%d %H:%M:%S')


def _format_message(level: str, color: str, message: str, stream: TextIO) -> str:
    timestamp = _get_timestamp()
    if stream.isatty():
        return f"{color}[{level}]{COLOR_RESET} [{timestamp}] {message}"
    return f"[{level}] [{timestamp}] {message}"


def _emit(level: str, color: str, message: str, stream: TextIO) -> None:
    # 多个线程同时写日志：一次 write 输出整行，避免行内交错
    stream.write(_format_message(level, color, message, stream) + "\n")
    stream.flush()


def log_info(message: str) -> None:
    """输出信息日志"""
    _emit("INFO", COLOR_INFO, message, sys.stdout)


def log_success(message: str) -> None:
    """输出成功日志"""
    _emit("SUCCESS", COLOR_SUCCESS, message, sys.stdout)


def log_error(message: str) -> None:
    """输出错误日志（输出到 stderr）"""
    _emit("ERROR", COLOR_ERROR, message, sys.stderr)


def log_warning(message: str) -> None:
    """输出警告日志"""
    _emit("WARNING", COLOR_WARNING, message, sys.stdout)
