import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

logger = logging.getLogger()
logger.setLevel(logging.INFO)

ACCOUNT_ID_VAR = "ACCOUNT_ID"
STAGE_NAME_VAR = "STAGE_NAME"


class MissingConfiguration(Exception):
    """Falta una variable de entorno obligatoria (o está vacía)."""

    variable = ""

    def __init__(self):
        super().__init__(f"{self.variable} is not defined")


class MissingAccountId(MissingConfiguration):
    variable = ACCOUNT_ID_VAR


class MissingStageName(MissingConfiguration):
    variable = STAGE_NAME_VAR


@dataclass(frozen=True)
class GreetingConfig:
    account_id: Optional[str] = None
    stage_name: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GreetingConfig":
        env = os.environ if environ is None else environ
        return cls(
            account_id=env.get(ACCOUNT_ID_VAR) or None,
            stage_name=env.get(STAGE_NAME_VAR) or None,
        )

    def validate(self) -> None:
        # Si faltan ambas, se reporta ACCOUNT_ID
        if not self.account_id:
            raise MissingAccountId()
        if not self.stage_name:
            raise MissingStageName()


def last_four(account_id: str) -> str:
    """Últimos cuatro caracteres del id; si es más corto, el id completo."""
    return account_id[-4:]


def greet(event: Any, context: Any, config: GreetingConfig) -> Dict[str, Any]:
    try:
        config.validate()
    except MissingConfiguration as e:
        logger.error(f"Configuración incompleta: {e}")
        return {"statusCode": 500, "body": str(e)}

    logger.info(f"Saludo generado para el stage {config.stage_name}")
    return {
        "statusCode": 200,
        "body": f"Hello from {config.stage_name} ({last_four(config.account_id)})!",
    }


def handler(event, context):
    """
    Lambda detrás de API Gateway (HTTP API) que responde un saludo con el
    stage y los últimos cuatro caracteres del ACCOUNT_ID.

    El entorno se lee en cada invocación; el evento se ignora.
    """
    request_id = getattr(context, "aws_request_id", None)
    logger.info(f"Invocación recibida: request_id={request_id}")
    return greet(event, context, GreetingConfig.from_env())
