import pytest

from vim_textarea.keymaps import (
    ActionRef,
    Binding,
    KeySequence,
    KeyStroke,
    KeymapConflictError,
    KeymapRegistry,
    WhenClause,
    load_default_keymaps,
)


def bind(binding_id: str, *keys: str, mode: str = "normal", when=()) -> Binding:
    return Binding(
        id=binding_id,
        mode=mode,
        sequence=KeySequence.from_strings(*(keys or ("g", "g"))),
        action_id="core.test",
        when=when,
    )


@pytest.fixture
def registry() -> KeymapRegistry:
    registry = KeymapRegistry()
    registry.register_action(
        ActionRef(id="core.test", handler=lambda *args: None, description="Do the thing")
    )
    return registry


def test_registered_binding_is_listed(registry: KeymapRegistry) -> None:
    binding = bind("normal.gg")

    registry.register_binding(binding)

    assert registry.stats().binding_count == 1
    assert list(registry.iter_bindings(mode="normal")) == [binding]


def test_identical_sequence_conflicts(registry: KeymapRegistry) -> None:
    registry.register_binding(bind("normal.gg"))

    with pytest.raises(KeymapConflictError):
        registry.register_binding(bind("normal.gg.duplicate"))


def test_prefix_of_existing_sequence_conflicts(registry: KeymapRegistry) -> None:
    registry.register_binding(bind("normal.gg"))

    with pytest.raises(KeymapConflictError) as excinfo:
        registry.register_binding(bind("normal.g", "g"))

    assert [b.id for b in excinfo.value.conflicts] == ["normal.gg"]


def test_extension_of_existing_sequence_conflicts(registry: KeymapRegistry) -> None:
    registry.register_binding(bind("normal.d", "d"))

    with pytest.raises(KeymapConflictError):
        registry.register_binding(bind("normal.dd", "d", "d"))


def test_same_sequence_in_other_mode_is_allowed(registry: KeymapRegistry) -> None:
    registry.register_binding(bind("normal.gg"))

    registry.register_binding(bind("insert.gg", mode="insert"))

    assert registry.stats().modes == ("insert", "normal")


def test_differently_gated_bindings_coexist(registry: KeymapRegistry) -> None:
    registry.register_binding(bind("default"))
    registry.register_binding(bind("panel", when=(WhenClause("panel_open"),)))
    registry.register_binding(bind("no_panel", when=("!panel_open",)))

    assert registry.stats().binding_count == 3


def test_replace_swaps_binding_with_same_id(registry: KeymapRegistry) -> None:
    first, second = bind("binding"), bind("binding", "z")

    registry.register_binding(first)
    registry.register_binding(second, replace=True)

    assert list(registry.iter_bindings()) == [second]


def test_duplicate_id_without_replace_is_rejected(registry: KeymapRegistry) -> None:
    registry.register_binding(bind("binding"))

    with pytest.raises(ValueError):
        registry.register_binding(bind("binding", "z"))


def test_binding_to_unknown_action_is_rejected() -> None:
    with pytest.raises(KeyError):
        KeymapRegistry().register_binding(bind("orphan"))


def test_update_binding_changes_sequence_and_revision(registry: KeymapRegistry) -> None:
    registry.register_binding(bind("binding"))
    before = registry.revision()

    updated = registry.update_binding(
        "binding", sequence=KeySequence.from_strings("d", "d"), description="delete line"
    )

    assert updated.sequence.tokens == ("d", "d")
    assert updated.description == "delete line"
    assert registry.revision() == before + 1


def test_update_of_unknown_binding_raises(registry: KeymapRegistry) -> None:
    with pytest.raises(KeyError):
        registry.update_binding("missing", description="nothing")


def test_unregister_binding(registry: KeymapRegistry) -> None:
    binding = bind("binding")
    registry.register_binding(binding)

    assert registry.unregister_binding("binding") == binding
    assert registry.unregister_binding("binding") is None
    assert registry.stats().binding_count == 0
    assert registry.stats().modes == ()


@pytest.mark.parametrize(
    ("notation", "token", "modifiers"),
    [
        ("x", "x", ()),
        ("ctrl+r", "ctrl+r", ("ctrl",)),
        ("Ctrl+r", "ctrl+r", ("ctrl",)),
        ("escape", "ESC", ()),
        ("+", "+", ()),
        ("shift+ctrl+x", "ctrl+shift+x", ("ctrl", "shift")),
    ],
)
def test_keystroke_parsing(notation: str, token: str, modifiers: tuple) -> None:
    stroke = KeyStroke.parse(notation)

    assert stroke.token == token
    assert stroke.modifiers == modifiers


def test_load_default_keymaps_registers_both_modes() -> None:
    registry = KeymapRegistry()

    load_default_keymaps(registry)

    assert registry.stats().modes == ("insert", "normal")
    assert registry.get_binding("normal.delete_line").sequence.tokens == ("d", "d")
    assert registry.get_binding("insert.exit_escape").sequence.tokens == ("ESC",)
    assert registry.get_action("motion.find_forward").wants_argument is True
    assert registry.get_action("motion.left").wants_argument is False


def test_load_default_keymaps_include_filters() -> None:
    registry = KeymapRegistry()

    load_default_keymaps(
        registry,
        include_actions=("core.enter_insert",),
        include_bindings=("normal.enter_insert",),
    )

    assert registry.stats().binding_count == 1
    assert registry.get_binding("normal.enter_insert").action_id == "core.enter_insert"


def test_load_default_keymaps_per_mode_override() -> None:
    registry = KeymapRegistry()
    custom = Binding(
        id="normal.enter_insert",
        mode="normal",
        sequence=KeySequence.from_strings("a"),
        action_id="core.enter_insert",
    )

    load_default_keymaps(registry, per_mode_overrides={"normal": (custom,)})

    assert registry.get_binding("normal.enter_insert").sequence.tokens == ("a",)
    with pytest.raises(KeyError):
        registry.get_binding("normal.append")


def test_per_mode_override_must_target_its_mode() -> None:
    stray = Binding(
        id="insert.stray",
        mode="insert",
        sequence=KeySequence.from_strings("ctrl+t"),
        action_id="insert.home",
    )

    with pytest.raises(ValueError):
        load_default_keymaps(KeymapRegistry(), per_mode_overrides={"normal": (stray,)})


def test_describe_lists_bindings_with_action_descriptions(
    registry: KeymapRegistry,
) -> None:
    registry.register_binding(bind("normal.x", "x"))
    registry.register_binding(bind("normal.gg"))

    assert registry.describe("normal") == [("g g", "Do the thing"), ("x", "Do the thing")]
