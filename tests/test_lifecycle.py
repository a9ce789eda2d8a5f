"""Tests for the registry lifecycle state machine."""

import pytest
from pydantic import ValidationError

from paramregistry.core.lifecycle import (
    LifecycleController,
    LifecycleState,
    Operation,
    is_legal,
    ordering_violation,
    permission_violation,
)
from paramregistry.exceptions import OrderingError, SourcePermissionError, StructuralError
from paramregistry.models import AllowedSource, SourcePolicy

ALL = SourcePolicy.from_flags(
    AllowedSource.FROM_FILE, AllowedSource.FROM_CMDLINE, AllowedSource.DYNAMIC
)
NONE = SourcePolicy.from_flags()


class TestSourcePolicy:
    """Test SourcePolicy construction."""

    @pytest.mark.unit
    def test_flags(self):
        policy = SourcePolicy.from_flags(AllowedSource.FROM_FILE, AllowedSource.DYNAMIC)
        assert policy.file
        assert policy.dynamic
        assert not policy.cmdline
        assert str(policy) == "{DYNAMIC, FROM_FILE}"

    @pytest.mark.unit
    def test_empty_policy(self):
        assert not NONE.file and not NONE.cmdline and not NONE.dynamic
        assert str(NONE) == "{}"

    @pytest.mark.unit
    def test_duplicate_flag(self):
        with pytest.raises(StructuralError, match="Duplicate flag: FROM_FILE"):
            SourcePolicy.from_flags(AllowedSource.FROM_FILE, AllowedSource.FROM_FILE)

    @pytest.mark.unit
    def test_not_a_flag(self):
        with pytest.raises(StructuralError, match="Not a source flag"):
            SourcePolicy.from_flags("from_file")

    @pytest.mark.unit
    def test_policy_is_frozen(self):
        with pytest.raises(ValidationError):
            ALL.sources = frozenset()


class TestPermissionViolation:
    """Test which operations need which source."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "operation, needed",
        [
            (Operation.LOAD_FILE, AllowedSource.FROM_FILE),
            (Operation.LOAD_ARGS, AllowedSource.FROM_CMDLINE),
            (Operation.SET, AllowedSource.DYNAMIC),
        ],
    )
    def test_missing_source(self, operation, needed):
        assert permission_violation(operation, NONE) is needed
        assert permission_violation(operation, ALL) is None

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "operation", [Operation.DECLARE, Operation.READ, Operation.CHECK_REQUIRED, Operation.DUMP]
    )
    def test_operations_needing_no_source(self, operation):
        assert permission_violation(operation, NONE) is None


class TestOrderingViolation:
    """Test the ordering rules of each state."""

    @pytest.mark.unit
    def test_start_allows_only_declare(self):
        assert ordering_violation(Operation.DECLARE, LifecycleState.START, ALL) is None
        for operation in (Operation.LOAD_FILE, Operation.LOAD_ARGS, Operation.READ, Operation.SET):
            reason = ordering_violation(operation, LifecycleState.START, ALL)
            assert reason == f"Must declare all parameters before {operation.value}"

    @pytest.mark.unit
    def test_declare_after_start(self):
        for state in (LifecycleState.INITIALIZED, LifecycleState.DONE_FILE, LifecycleState.DONE_CMDLINE):
            assert ordering_violation(Operation.DECLARE, state, ALL) == "All parameters are already declared"

    @pytest.mark.unit
    def test_file_load(self):
        assert ordering_violation(Operation.LOAD_FILE, LifecycleState.INITIALIZED, ALL) is None
        assert (
            ordering_violation(Operation.LOAD_FILE, LifecycleState.DONE_FILE, ALL)
            == "Properties file already loaded"
        )
        assert (
            ordering_violation(Operation.LOAD_FILE, LifecycleState.DONE_CMDLINE, ALL)
            == "Properties file must be loaded before command line"
        )

    @pytest.mark.unit
    def test_args_load_with_file_allowed(self):
        assert (
            ordering_violation(Operation.LOAD_ARGS, LifecycleState.INITIALIZED, ALL)
            == "Parsing command line must occur after loading properties file"
        )
        assert ordering_violation(Operation.LOAD_ARGS, LifecycleState.DONE_FILE, ALL) is None
        assert (
            ordering_violation(Operation.LOAD_ARGS, LifecycleState.DONE_CMDLINE, ALL)
            == "Command line arguments already parsed"
        )

    @pytest.mark.unit
    def test_args_load_without_file(self):
        policy = SourcePolicy.from_flags(AllowedSource.FROM_CMDLINE)
        assert ordering_violation(Operation.LOAD_ARGS, LifecycleState.INITIALIZED, policy) is None

    @pytest.mark.unit
    def test_set_waits_for_every_allowed_load(self):
        assert (
            ordering_violation(Operation.SET, LifecycleState.DONE_FILE, ALL)
            == "Must parse command line before dynamic assignment"
        )
        assert ordering_violation(Operation.SET, LifecycleState.DONE_CMDLINE, ALL) is None

        file_only = SourcePolicy.from_flags(AllowedSource.FROM_FILE, AllowedSource.DYNAMIC)
        assert (
            ordering_violation(Operation.SET, LifecycleState.INITIALIZED, file_only)
            == "Must load properties file before dynamic assignment"
        )
        assert ordering_violation(Operation.SET, LifecycleState.DONE_FILE, file_only) is None

        dynamic_only = SourcePolicy.from_flags(AllowedSource.DYNAMIC)
        assert ordering_violation(Operation.SET, LifecycleState.INITIALIZED, dynamic_only) is None

    @pytest.mark.unit
    def test_reads_allowed_once_initialized(self):
        for state in (LifecycleState.INITIALIZED, LifecycleState.DONE_FILE, LifecycleState.DONE_CMDLINE):
            assert is_legal(Operation.READ, state, NONE)
            assert is_legal(Operation.DUMP, state, NONE)

    @pytest.mark.unit
    def test_is_legal_combines_both_checks(self):
        assert not is_legal(Operation.LOAD_FILE, LifecycleState.INITIALIZED, NONE)
        assert not is_legal(Operation.LOAD_FILE, LifecycleState.DONE_FILE, ALL)
        assert is_legal(Operation.LOAD_FILE, LifecycleState.INITIALIZED, ALL)


class TestLifecycleController:
    """Test LifecycleController transitions and errors."""

    @pytest.fixture
    def controller(self):
        return LifecycleController(ALL)

    @pytest.mark.unit
    def test_initial_state(self, controller):
        assert controller.state is LifecycleState.START
        assert controller.policy == ALL

    @pytest.mark.unit
    def test_permission_checked_before_ordering(self):
        controller = LifecycleController(NONE)
        with pytest.raises(SourcePermissionError, match="FROM_FILE") as exc_info:
            controller.require(Operation.LOAD_FILE)
        assert exc_info.value.source is AllowedSource.FROM_FILE

    @pytest.mark.unit
    def test_ordering_error_carries_state(self, controller):
        with pytest.raises(OrderingError) as exc_info:
            controller.require(Operation.READ)
        assert exc_info.value.state is LifecycleState.START

    @pytest.mark.unit
    def test_transitions(self, controller):
        controller.advance(LifecycleState.INITIALIZED)
        controller.complete(Operation.LOAD_FILE)
        assert controller.state is LifecycleState.DONE_FILE
        controller.complete(Operation.LOAD_ARGS)
        assert controller.state is LifecycleState.DONE_CMDLINE

    @pytest.mark.unit
    def test_complete_without_transition(self, controller):
        controller.advance(LifecycleState.INITIALIZED)
        controller.complete(Operation.READ)
        assert controller.state is LifecycleState.INITIALIZED

    @pytest.mark.unit
    def test_never_moves_backwards(self, controller):
        controller.advance(LifecycleState.DONE_FILE)
        with pytest.raises(OrderingError, match="back to INITIALIZED"):
            controller.advance(LifecycleState.INITIALIZED)
        assert controller.state is LifecycleState.DONE_FILE
