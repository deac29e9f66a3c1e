# GitHub Token 读取：命令行优先，其次系统钥匙串
#
#   keyring set reposync token      # 预先把 token 存入钥匙串

from typing import Optional, Tuple

import keyring
from keyring.errors import KeyringError

SERVICE_NAME = "reposync"
ACCOUNT_NAME = "token"


def load_token_from_keyring() -> Optional[str]:
    """Return the stored token, or None when no usable keyring backend has one."""
    try:
        return keyring.get_password(SERVICE_NAME, ACCOUNT_NAME)
    except KeyringError:
        return None


def resolve_token(cli_token: Optional[str]) -> Tuple[str, str]:
    """Pick the token to use. Returns (token, source); source is "flag", "keyring" or "none"."""
    if cli_token:
        return cli_token, "flag"
    token = load_token_from_keyring()
    if token:
        return token, "keyring"
    return "", "none"
