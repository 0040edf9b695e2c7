import pytest

from akari_editor.keymaps import (
    ActionRef,
    Binding,
    KeyStroke,
    ShortcutConflictError,
    ShortcutRegistry,
    WhenClause,
    load_default_shortcuts,
)


def make_action(action_id: str = "core.test") -> ActionRef:
    return ActionRef(id=action_id, handler=lambda *args, **kwargs: None)


def make_binding(
    *,
    binding_id: str,
    scope: str = "editor",
    chord: str = "ctrl+b",
    action_id: str = "core.test",
    when: tuple[WhenClause, ...] = (),
    priority: int = 0,
) -> Binding:
    return Binding(
        id=binding_id,
        scope=scope,
        stroke=KeyStroke.parse(chord),
        action_id=action_id,
        when=when,
        priority=priority,
    )


def test_keystroke_normalises_platform_modifiers() -> None:
    assert KeyStroke("B", ("Cmd",)).token == "ctrl+b"
    assert KeyStroke("z", ("shift", "meta")).token == "ctrl+shift+z"
    assert KeyStroke.parse("Ctrl+Shift+Z").token == "ctrl+shift+z"
    assert KeyStroke.parse("Option+x").token == "alt+x"
    assert KeyStroke("Return").token == "enter"
    assert KeyStroke("grave_accent", ("ctrl",)).token == "ctrl+`"


def test_keystroke_parses_plus_key() -> None:
    assert KeyStroke.parse("+").key == "+"
    assert KeyStroke.parse("ctrl++").token == "ctrl++"


def test_keystroke_rejects_empty_input() -> None:
    with pytest.raises(ValueError):
        KeyStroke("")
    with pytest.raises(ValueError):
        KeyStroke.parse("  ")


def test_when_clause_parse_and_evaluate() -> None:
    negated = WhenClause.parse("!dialog_open")

    assert negated == WhenClause("dialog_open", False)
    assert negated.evaluate({})
    assert not negated.evaluate({"dialog_open": True})


def test_binding_accepts_text_chord_and_when() -> None:
    binding = Binding(
        id="b", scope="editor", stroke="Ctrl+B", action_id="a", when=("!split",)
    )

    assert binding.key_signature == "ctrl+b"
    assert binding.when_map == {"split": False}
    assert binding.allows({"split": False})


def test_register_binding_success() -> None:
    registry = ShortcutRegistry()
    registry.register_action(make_action())
    binding = make_binding(binding_id="editor.bold")

    registry.register_binding(binding)

    assert list(registry.iter_bindings()) == [binding]
    assert list(registry.iter_bindings(scope="editor")) == [binding]
    assert registry.get_binding("editor.bold") is binding


def test_register_binding_conflict_detection() -> None:
    registry = ShortcutRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="editor.bold"))

    with pytest.raises(ShortcutConflictError) as excinfo:
        registry.register_binding(make_binding(binding_id="editor.bold.duplicate"))

    assert [b.id for b in excinfo.value.conflicts] == ["editor.bold"]


def test_same_chord_in_other_scope_is_not_a_conflict() -> None:
    registry = ShortcutRegistry()
    registry.register_action(make_action())

    registry.register_binding(make_binding(binding_id="editor.esc", chord="escape"))
    registry.register_binding(
        make_binding(binding_id="dialog.esc", scope="dialog", chord="escape")
    )

    assert [b.id for b in registry.iter_bindings("editor")] == ["editor.esc"]
    assert [b.id for b in registry.iter_bindings("dialog")] == ["dialog.esc"]


def test_register_binding_non_overlapping_when() -> None:
    registry = ShortcutRegistry()
    registry.register_action(make_action())

    registry.register_binding(make_binding(binding_id="default"))
    registry.register_binding(
        make_binding(binding_id="dropdown", when=(WhenClause("dropdown_open"),))
    )
    registry.register_binding(
        make_binding(binding_id="no_dropdown", when=(WhenClause.parse("!dropdown_open"),))
    )

    assert [b.id for b in registry.iter_bindings("editor")] == [
        "default",
        "dropdown",
        "no_dropdown",
    ]


def test_register_binding_requires_action() -> None:
    registry = ShortcutRegistry()

    with pytest.raises(KeyError):
        registry.register_binding(make_binding(binding_id="orphan"))


def test_duplicate_action_rejected_unless_replacing() -> None:
    registry = ShortcutRegistry()
    registry.register_action(make_action())

    with pytest.raises(ValueError):
        registry.register_action(make_action())

    replacement = make_action()
    assert registry.register_action(replacement, replace=True) is replacement


def test_replace_binding_evicts_conflicts() -> None:
    registry = ShortcutRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="first"))

    registry.register_binding(make_binding(binding_id="second"), replace=True)

    assert [b.id for b in registry.iter_bindings("editor")] == ["second"]


def test_register_and_unregister_bump_revision() -> None:
    registry = ShortcutRegistry()
    registry.register_action(make_action())
    revision = registry.revision()

    binding = registry.register_binding(make_binding(binding_id="bold"))
    assert registry.revision() == revision + 1

    assert registry.unregister_binding("bold") == binding
    assert registry.revision() == revision + 2
    assert registry.unregister_binding("bold") is None
    assert registry.revision() == revision + 2
    assert list(registry.iter_bindings()) == []


def test_unregistered_chord_can_be_claimed_again() -> None:
    registry = ShortcutRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="bold"))
    registry.unregister_binding("bold")

    registry.register_binding(make_binding(binding_id="strong"))

    assert registry.detect_conflicts(make_binding(binding_id="other")) == [
        registry.get_binding("strong")
    ]


def test_load_default_shortcuts() -> None:
    registry = ShortcutRegistry()
    load_default_shortcuts(registry)
    bindings = list(registry.iter_bindings())

    assert len(bindings) == 14
    assert {b.scope for b in bindings} == {"dialog", "editor"}
    assert all(registry.get_action(b.action_id).id == b.action_id for b in bindings)
    assert registry.get_binding("editor.redo").key_signature == "ctrl+shift+z"


def test_load_default_shortcuts_filters() -> None:
    registry = ShortcutRegistry()
    load_default_shortcuts(
        registry,
        include_bindings=["editor.bold", "editor.save"],
        exclude_bindings=["editor.save"],
        extra_bindings=[
            make_binding(binding_id="editor.custom", chord="ctrl+j", action_id="format.bold")
        ],
    )

    assert sorted(b.id for b in registry.iter_bindings()) == ["editor.bold", "editor.custom"]
