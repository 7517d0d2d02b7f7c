# logging_config.py

import os
import sys

from loguru import logger


def configurar_logging(nivel='INFO', diretorio='logs'):
    """Configura os handlers do loguru (console e, opcionalmente, arquivo)."""
    # Remove o handler padrão para evitar duplicação de logs no console.
    logger.remove()

    logger.add(
        sys.stderr,
        level=nivel,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        colorize=True
    )

    # Arquivo com rotação de 10 MB e retenção de 30 dias; guarda tudo a partir de DEBUG.
    if diretorio:
        os.makedirs(diretorio, exist_ok=True)
        logger.add(
            os.path.join(diretorio, "fopag_painel_{time}.log"),
            rotation="10 MB",
            retention="30 days",
            level="DEBUG",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"
        )
    return logger


log = logger
