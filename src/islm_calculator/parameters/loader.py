"""パラメータファイル（TOML）の読み込み

トップレベルのキー、または [parameters] テーブルにパラメータを記述する。
省略したパラメータはデフォルト値を使う。

例:
    [parameters]
    G0 = 3500
    Mp = 26000
"""

import logging
import math
import tomllib
from pathlib import Path

from islm_calculator.core.exceptions import ParameterFileError
from islm_calculator.parameters.defaults import FIELD_NAMES, ParameterSet

logger = logging.getLogger(__name__)


def parse_parameters(data: dict[str, object]) -> ParameterSet:
    """辞書からパラメータセットを構築する

    Raises:
        ParameterFileError: 未知のキー、数値でない値、または nan・inf がある場合
    """
    table = data.get("parameters", data)
    if not isinstance(table, dict):
        raise ParameterFileError("[parameters] はテーブルである必要があります")

    unknown = sorted(set(table) - set(FIELD_NAMES))
    if unknown:
        raise ParameterFileError(f"未知のパラメータ: {', '.join(unknown)}")

    values: dict[str, float] = {}
    for name, value in table.items():
        # bool は int のサブクラスなので明示的に除外
        if isinstance(value, bool) or not isinstance(value, int | float):
            raise ParameterFileError(f"{name} は数値である必要があります: {value!r}")
        if not math.isfinite(value):
            raise ParameterFileError(f"{name} は有限の数値である必要があります: {value!r}")
        values[name] = float(value)

    return ParameterSet().with_updates(**values)


def load_parameters(path: Path) -> ParameterSet:
    """TOMLファイルからパラメータセットを読み込む

    Args:
        path: TOMLファイルのパス

    Raises:
        ParameterFileError: ファイルが読めない、またはTOMLとして不正な場合
    """
    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except OSError as e:
        raise ParameterFileError(f"パラメータファイルを読み込めません: {path}") from e
    except tomllib.TOMLDecodeError as e:
        raise ParameterFileError(f"TOMLの解析に失敗しました: {path}: {e}") from e

    params = parse_parameters(data)
    logger.debug("パラメータを読み込みました: %s", path)
    return params
