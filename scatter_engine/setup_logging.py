import logging
import sys
from pathlib import Path
from typing import Union


def setup_logging(log_dir: Union[str, Path, None] = "logs", level: int = logging.INFO):
    """
    Настраивает глобальный логгер.
    - Формат сообщений как в остальных инструментах.
    - Вывод в консоль (stdout) и, если задан log_dir, в файл log_dir/scatter.log.
    """
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(
            logging.FileHandler(log_dir / "scatter.log", mode="w", encoding="utf-8")
        )

    logging.basicConfig(
        level=level,
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s:%(lineno)d | %(message)s",
        datefmt="%H:%M:%S",
        handlers=handlers,
        force=True,  # убирает старые хендлеры, чтобы не было дублей
    )

    logging.getLogger("scatter_engine").setLevel(level)
    logging.getLogger("PIL").setLevel(logging.WARNING)
