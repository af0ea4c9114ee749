from typing import Optional

TRUE_VALUES = {"true", "1", "yes", "on"}
FALSE_VALUES = {"false", "0", "no", "off"}


def get_bool(value: Optional[str], default: bool = True) -> bool:
    if value is None:
        return default
    value = value.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    return default


def get_env_bool(env, var_name: str, default: bool = False) -> bool:
    """Retrieve environment variable as a boolean."""
    return get_bool(env.get(var_name), default)


def get_env_int(env, var_name: str, default: int) -> int:
    """Retrieve environment variable as an int; unset, empty or garbage gives ``default``."""
    value = env.get(var_name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        return default
