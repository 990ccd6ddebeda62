# dashboard/actions/base.py
"""
The validate-execute-react routine shared by every form action.

1. Parse the submitted fields through the operation's schema. Invalid input
   comes back as a state object carrying every field error at once.
2. Build and execute exactly one mutating statement.
3. A store failure comes back as a state object with a summary message.
4. On commit, invalidate the listing view and return a ``Redirect`` to it.

Deletes follow the same steps without a schema, but a store failure is
raised as ``StoreMutationError`` instead of being returned.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Tuple, Type

from pydantic import BaseModel, ValidationError
from sqlalchemy import Table
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.sql.expression import Executable

from dashboard.cache import ViewCache
from dashboard.models.results import ActionResult, Redirect, State

logger = logging.getLogger(__name__)


class StoreMutationError(RuntimeError):
    """A delete the store refused; left for the top-level error handler."""


@dataclass(frozen=True)
class FormAction:
    entity: str
    verb: str
    schema: Type[BaseModel]
    list_path: str
    # every cached view that renders rows this action changes
    invalidates: Tuple[str, ...] = ()
    state_class: Type[State] = State

    @property
    def missing_fields_message(self) -> str:
        return f"Missing Fields. Failed to {self.verb} {self.entity}."

    @property
    def database_error_message(self) -> str:
        return f"Database Error: Failed to {self.verb} {self.entity}."


def read_form_fields(schema: Type[BaseModel], form: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Pick the schema's fields out of a submitted form.

    Fields the form did not send are passed as None, the way an HTML form
    lookup reports them.
    """
    return {
        field.alias or name: form.get(field.alias or name)
        for name, field in schema.model_fields.items()
    }


def flatten_errors(exc: ValidationError) -> Dict[str, List[str]]:
    errors: Dict[str, List[str]] = {}
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else "__root__"
        errors.setdefault(field, []).append(error["msg"])
    return errors


def run_form_action(
    action: FormAction,
    form: Mapping[str, Any],
    build_statement: Callable[[Any], Executable],
    *,
    engine: Engine,
    cache: ViewCache,
) -> ActionResult:
    try:
        fields = action.schema.model_validate(read_form_fields(action.schema, form))
    except ValidationError as exc:
        errors = flatten_errors(exc)
        logger.info(
            "%s %s rejected, invalid fields: %s",
            action.verb, action.entity, ", ".join(errors),
        )
        return action.state_class(errors=errors, message=action.missing_fields_message)

    stmt = build_statement(fields)

    try:
        with engine.begin() as conn:
            conn.execute(stmt)
    except SQLAlchemyError:
        logger.exception("Database error on %s %s", action.verb.lower(), action.entity.lower())
        return action.state_class(message=action.database_error_message)

    logger.info("%s %s committed", action.verb, action.entity)
    for path in action.invalidates or (action.list_path,):
        cache.invalidate(path)
    return Redirect(location=action.list_path)


def run_delete(
    table: Table,
    record_id: str,
    *,
    failure_message: str,
    invalidates: Tuple[str, ...],
    engine: Engine,
    cache: ViewCache,
) -> None:
    try:
        with engine.begin() as conn:
            conn.execute(table.delete().where(table.c.id == record_id))
    except SQLAlchemyError as exc:
        logger.exception("Database error deleting %s %s", table.name, record_id)
        raise StoreMutationError(failure_message) from exc

    logger.info("Deleted %s %s", table.name, record_id)
    for path in invalidates:
        cache.invalidate(path)
