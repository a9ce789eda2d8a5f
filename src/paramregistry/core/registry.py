"""Typed, validated parameter registry."""

import logging
import os
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any, Generic, TypeVar

from paramregistry.exceptions import (
    ArgumentError,
    CompletenessError,
    DeclarationError,
    ErrorContext,
    MutabilityError,
    ParameterLookupError,
    ParameterValidationError,
    StructuralError,
    UnsetParameterError,
)
from paramregistry.models import (
    AllowedSource,
    Importance,
    LoadSummary,
    Parameter,
    ParameterReport,
    Settable,
    SourcePolicy,
    ValueSource,
    ValueType,
)
from paramregistry.sources import DEFAULT_MARKER, PropertiesFile, iter_argument_pairs
from paramregistry.validators import Validator

from .lifecycle import LifecycleController, LifecycleState, Operation, ordering_violation

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Enum)


class Registry(Generic[K]):
    """
    Registry of parameters keyed by the members of one Enum.

    Parameters are declared once each; declaring the last member of the enum
    initializes the registry. Values can then come from a properties file,
    then from command-line tokens, then from dynamic writes, each only if
    the registry was constructed with the matching AllowedSource.

    Partial application: if a load fails part way, entries applied earlier in
    the same call stay applied and the lifecycle state does not advance, so
    the load can be retried once the input is fixed.

    Not thread-safe. Confine a registry to one owner or serialize access.

    Usage Example:
        ```python
        class Options(Enum):
            PORT = auto()
            DEBUG = auto()

        registry = Registry(Options, AllowedSource.FROM_FILE,
                            AllowedSource.FROM_CMDLINE, AllowedSource.DYNAMIC)
        registry.declare(Options.PORT, "port", ValueType.INTEGER, 5555,
                         IntegerValidator(1024, 65535), Settable.STATIC,
                         Importance.REQUIRED)
        registry.declare(Options.DEBUG, "debug", ValueType.BOOLEAN, True,
                         BooleanValidator(), Settable.DYNAMIC)

        registry.load_from_file("app.properties")
        registry.load_from_args(sys.argv[1:])
        port = registry.get(Options.PORT)
        registry.set(Options.DEBUG, False)
        ```
    """

    def __init__(self, key_type: type[K], *sources: AllowedSource) -> None:
        """
        Initialize an empty registry.

        Args:
            key_type: Enum class whose members identify the parameters
            *sources: Zero or more AllowedSource flags, each at most once

        Raises:
            StructuralError: If key_type is not an Enum with members, or a
                source flag is repeated
        """
        if not (isinstance(key_type, type) and issubclass(key_type, Enum)):
            raise StructuralError(f"{key_type!r} is not an enum")
        keys = list(key_type)
        if not keys:
            raise StructuralError(f"{key_type.__name__} has no enum members")

        self._key_type = key_type
        self._keys: list[K] = keys
        self._lifecycle = LifecycleController(SourcePolicy.from_flags(*sources))
        self._params: dict[K, Parameter] = {}
        self._names: dict[str, K] = {}
        self._required_count = 0

        logger.debug(
            f"Registry created for {key_type.__name__} ({len(keys)} keys), "
            f"sources={self._lifecycle.policy}"
        )

    # =================================================================
    # Introspection
    # =================================================================

    @property
    def key_type(self) -> type[K]:
        return self._key_type

    @property
    def state(self) -> LifecycleState:
        return self._lifecycle.state

    @property
    def sources(self) -> SourcePolicy:
        return self._lifecycle.policy

    def __contains__(self, key: object) -> bool:
        return key in self._params

    def __len__(self) -> int:
        return len(self._params)

    def lookup(self, external_name: str) -> K:
        """
        Find the key declared under an external name.

        Raises:
            ParameterLookupError: If no parameter uses that name
        """
        try:
            return self._names[external_name]
        except KeyError:
            raise ParameterLookupError(f"Unknown parameter: {external_name}", key=external_name) from None

    def source_of(self, key: K) -> ValueSource:
        """Return where the current value of ``key`` came from."""
        return self._parameter(key).source

    # =================================================================
    # Declaration
    # =================================================================

    def declare(
        self,
        key: K,
        external_name: str,
        value_type: ValueType,
        default: Any,
        validator: Validator,
        settable: Settable,
        importance: Importance = Importance.OPTIONAL,
    ) -> None:
        """
        Declare one parameter.

        Args:
            key: Enum member identifying the parameter
            external_name: Name used in properties files and on the command line
            value_type: Type of the parameter's values
            default: Initial value; None leaves the parameter unset
            validator: Validator owned by this parameter from now on
            settable: DYNAMIC allows set() after loading
            importance: REQUIRED parameters must end up with a value

        Raises:
            ParameterLookupError: If key is not a member of the key enum
            DeclarationError: Once every key is declared, or for a dynamic
                parameter on a non-dynamic registry, a repeated key or
                external name, a blank or padded external name, a default of
                the wrong type, a missing or mismatched validator, or a
                default the validator rejects
        """
        with self._operation("declare parameter", key):
            reason = ordering_violation(Operation.DECLARE, self.state, self.sources)
            if reason is not None:
                raise DeclarationError(key, reason, state=self.state)

            if settable is Settable.DYNAMIC and not self.sources.dynamic:
                raise DeclarationError(key, "parameter is dynamic but registry is not")
            self._check_key(key)
            if key in self._params:
                raise DeclarationError(key, "already declared")

            if external_name is None:
                raise DeclarationError(key, "external name is null")
            if not isinstance(external_name, str):
                raise DeclarationError(key, "external name must be a string")
            if not external_name.strip():
                raise DeclarationError(key, "external name is blank")
            if external_name.strip() != external_name:
                raise DeclarationError(key, "external name has leading/trailing blanks")
            if external_name in self._names:
                raise DeclarationError(
                    key, f"external name '{external_name}' already used by {self._names[external_name].name}"
                )

            if not isinstance(value_type, ValueType):
                raise DeclarationError(key, f"unknown value type {value_type!r}")
            if not value_type.accepts(default):
                raise DeclarationError(
                    key,
                    f"type mismatch: default is {type(default).__name__} {default!r}, "
                    f"but type is {value_type.value}",
                )

            if validator is None:
                raise DeclarationError(key, "validator must not be null")
            validator_type = getattr(validator, "value_type", None)
            if validator_type is not None and validator_type is not value_type:
                raise DeclarationError(
                    key, f"validator checks {validator_type.value}, parameter is {value_type.value}"
                )

            try:
                validator.check(default)
            except ParameterValidationError as e:
                raise DeclarationError(key, f"invalid default: {e.reason}") from e

            self._params[key] = Parameter(
                key=key,
                external_name=external_name,
                value_type=value_type,
                validator=validator,
                value=validator.value,
                importance=importance,
                settable=settable,
                source=ValueSource.DEFAULT,
            )
            self._names[external_name] = key
            if importance is Importance.REQUIRED:
                self._required_count += 1

            logger.debug(f"Declared {key.name} as '{external_name}' ({value_type.value}) = {validator.value!r}")

            if len(self._params) == len(self._keys):
                self._lifecycle.advance(LifecycleState.INITIALIZED)

    # =================================================================
    # Loading
    # =================================================================

    def load_from_file(self, source: str | os.PathLike[str] | Mapping[str, str]) -> LoadSummary:
        """
        Apply values from a properties file or any string mapping.

        Every declared external name present in the source is converted and
        validated; absent names keep their current value. Keys that match no
        parameter are logged as a warning, also when the load then fails the
        completeness check.

        Args:
            source: Path of a properties file, or a mapping of external name
                to raw string value

        Returns:
            Summary of applied and ignored names

        Raises:
            SourcePermissionError: If FROM_FILE is not allowed
            OrderingError: Unless the registry is exactly INITIALIZED
            PropertiesFileError: If the file cannot be read or parsed
            ParameterValidationError: If a present value is rejected
            CompletenessError: If a REQUIRED parameter is still unset
        """
        with self._operation("load properties"):
            self._lifecycle.require(Operation.LOAD_FILE)

            if isinstance(source, Mapping):
                provider: Mapping[str, str] = source
                label = getattr(source, "path", None) or "<mapping>"
            else:
                provider = PropertiesFile.read(source)
                label = provider.path

            applied: list[str] = []
            required_hits: set[K] = set()
            for external_name in sorted(self._names):
                raw = provider.get(external_name)
                if raw is None:
                    continue
                param = self._params[self._names[external_name]]
                self._apply_raw(param, raw, ValueSource.FILE)
                applied.append(external_name)
                if param.is_required:
                    required_hits.add(param.key)

            ignored = [name for name in provider if name not in self._names]
            if ignored:
                logger.warning(
                    f"{len(ignored)} properties from '{label}' not used "
                    f"({', '.join(ignored)}), processed = {len(applied)}"
                )

            if len(required_hits) < self._required_count:
                self.check_required()

            self._lifecycle.complete(Operation.LOAD_FILE)
            logger.info(f"Loaded {len(applied)} parameter(s) from {label}")
            return LoadSummary(source=ValueSource.FILE, applied=applied, ignored=ignored)

    def load_from_args(self, tokens: Sequence[str], marker: str = DEFAULT_MARKER) -> LoadSummary:
        """
        Apply values from ordered command-line tokens (``-name value`` pairs).

        Args:
            tokens: Tokens such as ``sys.argv[1:]``
            marker: Prefix that marks a parameter name

        Returns:
            Summary of applied names

        Raises:
            SourcePermissionError: If FROM_CMDLINE is not allowed
            OrderingError: If parameters are not all declared, the tokens were
                already loaded, or the properties file must be loaded first
            ArgumentError: If the tokens are not well-formed pairs
            ParameterLookupError: If a name matches no parameter
            ParameterValidationError: If a value is rejected
            CompletenessError: If a REQUIRED parameter is still unset
        """
        with self._operation("load command-line tokens"):
            self._lifecycle.require(Operation.LOAD_ARGS)
            if isinstance(tokens, str):
                raise ArgumentError("Expected a sequence of tokens, got a single string", token=tokens)

            applied: list[str] = []
            required_hits: set[K] = set()
            for external_name, raw in iter_argument_pairs(list(tokens), self._names, marker):
                param = self._params[self._names[external_name]]
                self._apply_raw(param, raw, ValueSource.COMMAND_LINE)
                applied.append(external_name)
                if param.is_required:
                    required_hits.add(param.key)

            if len(required_hits) < self._required_count:
                self.check_required()

            self._lifecycle.complete(Operation.LOAD_ARGS)
            logger.info(f"Loaded {len(applied)} parameter(s) from command line")
            return LoadSummary(source=ValueSource.COMMAND_LINE, applied=applied)

    def check_required(self) -> None:
        """
        Verify every REQUIRED parameter has a value.

        Raises:
            OrderingError: While parameters are still being declared
            CompletenessError: Naming the first unset REQUIRED parameter
        """
        with self._operation("check required parameters"):
            self._lifecycle.require(Operation.CHECK_REQUIRED)
            for key in self._keys:
                param = self._params[key]
                if param.is_required and not param.is_set:
                    raise CompletenessError(key.name, key=key)

    # =================================================================
    # Access
    # =================================================================

    def get(self, key: K) -> Any:
        """
        Return the current value of a parameter.

        Raises:
            ParameterLookupError: If key is foreign or undeclared
            OrderingError: While parameters are still being declared
            UnsetParameterError: If the parameter has no value
        """
        with self._operation("read parameter", key):
            param = self._parameter(key)
            self._lifecycle.require(Operation.READ)
            if not param.is_set:
                raise UnsetParameterError(key)
            return param.value

    def set(self, key: K, value: Any) -> None:
        """
        Dynamically change a DYNAMIC parameter after static loading.

        Raises:
            ParameterLookupError: If key is foreign or undeclared
            MutabilityError: If the parameter is STATIC
            OrderingError: If a permitted static load has not happened yet
            ParameterValidationError: If the value has the wrong type, is
                rejected by the validator, or would unset a REQUIRED parameter
        """
        with self._operation("set parameter", key):
            param = self._parameter(key)
            if not param.is_dynamic:
                raise MutabilityError(key)
            self._lifecycle.require(Operation.SET)

            if not param.value_type.accepts(value):
                raise ParameterValidationError(
                    f"type mismatch: value is {type(value).__name__}, but type is {param.value_type.value}",
                    name=param.external_name,
                    value=value,
                )
            if value is None and param.is_required:
                raise ParameterValidationError(
                    "required parameter cannot be unset", name=param.external_name, value=value
                )

            try:
                param.validator.check(value)
            except ParameterValidationError as e:
                raise e.for_parameter(param.external_name, key) from e

            param.assign(param.validator.value, ValueSource.DYNAMIC)
            logger.debug(f"{key.name} set dynamically to {param.value!r}")

    def dump(self) -> list[ParameterReport]:
        """
        Snapshot every parameter in key order for external rendering.

        Raises:
            OrderingError: While parameters are still being declared
        """
        with self._operation("dump parameters"):
            self._lifecycle.require(Operation.DUMP)
            return [self._params[key].to_report() for key in self._keys]

    # =================================================================
    # Internals
    # =================================================================

    def _operation(self, description: str, key: Any = None) -> ErrorContext:
        """Tag errors from one public operation with the key and current state."""
        return ErrorContext(
            description, logger_instance=logger, key=key, state=self.state, level=logging.DEBUG
        )

    def _check_key(self, key: Any) -> None:
        if not isinstance(key, self._key_type):
            raise ParameterLookupError(
                f"type mismatch: key is {type(key).__name__}, "
                f"but key type is {self._key_type.__name__}",
                key=key,
            )

    def _parameter(self, key: Any) -> Parameter:
        self._check_key(key)
        param = self._params.get(key)
        if param is None:
            raise ParameterLookupError(f"{key.name} not yet declared", key=key)
        return param

    def _apply_raw(self, param: Parameter, raw: Any, source: ValueSource) -> None:
        """Convert, validate and store one raw value."""
        if not isinstance(raw, str):
            raise ParameterValidationError(
                f"expected text, got {type(raw).__name__}",
                name=param.external_name,
                value=raw,
                key=param.key,
            )
        try:
            param.validator.convert_and_check(raw)
        except ParameterValidationError as e:
            logger.debug(f"Rejected {source.value} value for {param.external_name}: {e.reason}")
            raise e.for_parameter(param.external_name, param.key) from e
        except (ValueError, TypeError) as e:
            raise ParameterValidationError(
                str(e), name=param.external_name, value=raw, key=param.key
            ) from e

        if param.validator.value is None:
            raise ParameterValidationError(
                "value must not be null", name=param.external_name, value=raw, key=param.key
            )
        param.assign(param.validator.value, source)
