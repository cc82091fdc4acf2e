"""控制台入口 (Food Web Console)

按空白分隔的记号从输入流读取：
物种数量 → 各物种名称 → 捕食关系数量 → [捕食者索引] [猎物索引] 对 → 灭绝物种索引

输出完整食物网报告，执行灭绝后再输出 UPDATED 报告。
"""
from __future__ import annotations

import logging
import sys
from typing import Iterator, TextIO

from .core.config import get_settings, setup_logging
from .models.config import FoodWebConfig
from .services.analytics.report_builder import FoodWebReportBuilder
from .services.food_web.analyzer import get_food_web_analyzer
from .services.food_web.errors import CycleDetectedError, InvalidIndexError
from .services.food_web.store import FoodWebStore, build_store

logger = logging.getLogger(__name__)

SEPARATOR = "--------------------------------"


class ConsoleInputError(ValueError):
    """输入流提前结束或出现非法数字"""
    pass


class TokenReader:
    """逐个读取空白分隔的记号"""

    def __init__(self, stream: TextIO):
        self._tokens = self._iter_tokens(stream)

    @staticmethod
    def _iter_tokens(stream: TextIO) -> Iterator[str]:
        for line in stream:
            yield from line.split()

    def next_token(self, what: str) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise ConsoleInputError(f"输入提前结束，缺少{what}") from None

    def next_int(self, what: str) -> int:
        token = self.next_token(what)
        try:
            return int(token)
        except ValueError:
            raise ConsoleInputError(f"{what}必须是整数，收到 {token!r}") from None


def _read_store(reader: TokenReader, out: TextIO) -> FoodWebStore:
    print("Enter number of organisms:", file=out)
    num_orgs = reader.next_int("物种数量")
    if num_orgs < 0:
        raise ConsoleInputError(f"物种数量不能为负数: {num_orgs}")

    print(f"Enter names for {num_orgs} organisms:", file=out)
    store = build_store([reader.next_token("物种名称") for _ in range(num_orgs)])

    print("Enter number of predator/prey relations:", file=out)
    num_rels = reader.next_int("捕食关系数量")

    print(f"Enter the pair of indices for the {num_rels} predator/prey relations", file=out)
    print("the format is [predator index] [prey index]:", file=out)
    for _ in range(num_rels):
        pred_ind = reader.next_int("捕食者索引")
        prey_ind = reader.next_int("猎物索引")
        try:
            store.add_predation(pred_ind, prey_ind)
        except InvalidIndexError as e:
            logger.warning(f"[控制台] 忽略非法捕食关系 {pred_ind} {prey_ind}: {e}")
            print(f"Invalid relation ignored: {pred_ind} {prey_ind}", file=out)

    return store


def run_console(
    stdin: TextIO,
    stdout: TextIO,
    config: FoodWebConfig | None = None,
) -> int:
    """运行控制台流程

    Returns:
        进程退出码：0 成功，1 输入错误、非法灭绝索引或捕食环
    """
    reader = TokenReader(stdin)
    analyzer = get_food_web_analyzer()
    builder = FoodWebReportBuilder(config)

    print("Welcome to the Food Web Application", file=stdout)
    print(SEPARATOR, file=stdout)

    try:
        store = _read_store(reader, stdout)
        print(SEPARATOR, file=stdout)

        stdout.write(builder.build(analyzer.analyze(store)))

        print(SEPARATOR, file=stdout)
        print("Enter extinct species index:", file=stdout)
        ext_ind = reader.next_int("灭绝物种索引")
        removed = store.remove_organism(ext_ind)
        print(f"Species Extinction: {removed.name}", file=stdout)
        print(SEPARATOR, file=stdout)
        print(file=stdout)

        stdout.write(builder.build(analyzer.analyze(store), updated=True))
        print(SEPARATOR, file=stdout)
    except ConsoleInputError as e:
        logger.error(f"[控制台] 输入错误: {e}")
        print(f"Input error: {e}", file=stdout)
        return 1
    except InvalidIndexError as e:
        logger.error(f"[控制台] 灭绝索引无效: {e}")
        print(f"Invalid extinct species index: {e.index}", file=stdout)
        return 1
    except CycleDetectedError as e:
        logger.error(f"[控制台] {e}")
        print("Food web contains a predation cycle; heights cannot be computed.", file=stdout)
        return 1

    return 0


def main() -> int:
    settings = get_settings()
    setup_logging(settings)
    return run_console(sys.stdin, sys.stdout)
