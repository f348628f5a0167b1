"""Tests for dependency installation logic."""

from pathlib import Path

import pytest

from hyprdots.core.errors import MissingHelperError
from hyprdots.core.installer import (
    ShellChangeOutcome,
    compute_missing,
    detect_aur_helper,
    ensure_aur_helper,
    ensure_shell,
    install_batch,
    query_installation_state,
    summarize,
)
from hyprdots.core.packages import PackageSource, PackageSpec, PackageStatus
from tests.fakes.package_manager import FakePackageManager
from tests.fakes.shell import FakeShell


def _spec(name: str, source: PackageSource = PackageSource.OFFICIAL, required: bool = True):
    return PackageSpec(name=name, source=source, required=required, description=f"{name} desc")


def _always(answer: bool):
    prompts: list[str] = []

    def confirm(message: str) -> bool:
        prompts.append(message)
        return answer

    return confirm, prompts


def test_detect_aur_helper_prefers_earlier_candidate() -> None:
    shell = FakeShell(installed_tools={"yay": "/usr/bin/yay", "paru": "/usr/bin/paru"})

    assert detect_aur_helper(shell, ("yay", "paru")) == "yay"
    assert detect_aur_helper(shell, ("paru", "yay")) == "paru"


def test_detect_aur_helper_falls_back_to_later_candidate() -> None:
    shell = FakeShell(installed_tools={"paru": "/usr/bin/paru"})

    assert detect_aur_helper(shell, ("yay", "paru")) == "paru"


def test_detect_aur_helper_returns_none_when_nothing_found() -> None:
    assert detect_aur_helper(FakeShell(), ("yay", "paru")) is None


def test_ensure_aur_helper_uses_detected_helper_without_prompting() -> None:
    shell = FakeShell(installed_tools={"paru": "/usr/bin/paru"})
    pm = FakePackageManager()
    confirm, prompts = _always(True)

    assert ensure_aur_helper(shell, pm, ("yay", "paru"), confirm) == "paru"
    assert prompts == []
    assert pm.bootstrap_calls == []


def test_ensure_aur_helper_bootstraps_preferred_helper_when_accepted() -> None:
    pm = FakePackageManager()
    confirm, prompts = _always(True)

    assert ensure_aur_helper(FakeShell(), pm, ("yay", "paru"), confirm) == "yay"
    assert pm.bootstrap_calls == ["yay"]
    assert len(prompts) == 1


def test_ensure_aur_helper_declined_is_fatal() -> None:
    pm = FakePackageManager()
    confirm, _prompts = _always(False)

    with pytest.raises(MissingHelperError, match="declined"):
        ensure_aur_helper(FakeShell(), pm, ("yay", "paru"), confirm)
    assert pm.bootstrap_calls == []


def test_ensure_aur_helper_failed_bootstrap_is_fatal() -> None:
    pm = FakePackageManager(bootstrap_succeeds=False)
    confirm, _prompts = _always(True)

    with pytest.raises(MissingHelperError, match="building yay failed"):
        ensure_aur_helper(FakeShell(), pm, ("yay", "paru"), confirm)


def test_query_installation_state_reports_installed_and_missing() -> None:
    pm = FakePackageManager(installed={"jq"})
    specs = [_spec("jq"), _spec("fuzzel")]

    state = query_installation_state(pm, specs)

    assert state == {"jq": PackageStatus.INSTALLED, "fuzzel": PackageStatus.MISSING}


def test_query_installation_state_is_never_cached() -> None:
    pm = FakePackageManager()
    specs = [_spec("jq")]

    query_installation_state(pm, specs)
    query_installation_state(pm, specs)

    assert pm.query_calls == ["jq", "jq"]


def test_compute_missing_preserves_declaration_order() -> None:
    specs = [_spec("a"), _spec("b"), _spec("c"), _spec("d")]
    state = {
        "a": PackageStatus.MISSING,
        "b": PackageStatus.INSTALLED,
        "c": PackageStatus.MISSING,
        "d": PackageStatus.INSTALLED,
    }

    assert [s.name for s in compute_missing(specs, state)] == ["a", "c"]


def test_compute_missing_is_stable_without_installs_in_between() -> None:
    pm = FakePackageManager(installed={"b"})
    specs = [_spec("a"), _spec("b"), _spec("c", PackageSource.AUR)]

    first = compute_missing(specs, query_installation_state(pm, specs))
    second = compute_missing(specs, query_installation_state(pm, specs))

    assert first == second
    assert [s.name for s in first] == ["a", "c"]


def test_compute_missing_treats_unqueried_specs_as_missing() -> None:
    assert compute_missing([_spec("x")], {}) == [_spec("x")]


def test_install_batch_issues_one_call_per_source() -> None:
    pm = FakePackageManager()
    missing = [
        _spec("jq"),
        _spec("vicinae", PackageSource.AUR),
        _spec("fuzzel"),
        _spec("inkdrop", PackageSource.AUR, required=False),
    ]

    results = install_batch(pm, missing, aur_helper="yay")

    assert pm.install_calls == [
        (("jq", "fuzzel"), PackageSource.OFFICIAL, "yay"),
        (("vicinae", "inkdrop"), PackageSource.AUR, "yay"),
    ]
    assert [r.success for r in results] == [True, True]


def test_install_batch_skips_empty_groups() -> None:
    pm = FakePackageManager()

    results = install_batch(pm, [_spec("jq")], aur_helper=None)

    assert len(results) == 1
    assert pm.install_calls == [(("jq",), PackageSource.OFFICIAL, None)]


def test_install_batch_reports_failure_without_per_package_fallback() -> None:
    pm = FakePackageManager(failing_sources={PackageSource.OFFICIAL})

    results = install_batch(pm, [_spec("jq"), _spec("fuzzel")], aur_helper=None)

    assert len(pm.install_calls) == 1
    assert results[0].success is False
    assert results[0].names == ("jq", "fuzzel")


def test_install_batch_requires_helper_for_aur_packages() -> None:
    with pytest.raises(ValueError, match="vicinae"):
        install_batch(FakePackageManager(), [_spec("vicinae", PackageSource.AUR)], aur_helper=None)


def test_summarize_classifies_every_package() -> None:
    specs = [
        _spec("zsh"),
        _spec("jq"),
        _spec("vicinae", PackageSource.AUR),
        _spec("btop", required=False),
        _spec("obsidian", required=False),
    ]
    before = {
        "zsh": PackageStatus.INSTALLED,
        "jq": PackageStatus.MISSING,
        "vicinae": PackageStatus.MISSING,
        "btop": PackageStatus.MISSING,
        "obsidian": PackageStatus.INSTALLED,
    }
    attempted = [specs[1], specs[2]]
    after = {"jq": PackageStatus.INSTALLED, "vicinae": PackageStatus.MISSING}

    summary = summarize(specs, before, attempted, after)

    assert [s.name for s in summary.already_satisfied] == ["zsh", "obsidian"]
    assert [s.name for s in summary.newly_installed] == ["jq"]
    assert [s.name for s in summary.failed] == ["vicinae"]
    assert [s.name for s in summary.skipped] == ["btop"]
    assert [s.name for s in summary.required_missing] == ["vicinae"]
    assert summary.success is False


def test_summarize_optional_failures_do_not_fail_the_run() -> None:
    optional = _spec("inkdrop", PackageSource.AUR, required=False)
    summary = summarize(
        [optional],
        {"inkdrop": PackageStatus.MISSING},
        [optional],
        {"inkdrop": PackageStatus.MISSING},
    )

    assert summary.failed == (optional,)
    assert summary.required_missing == ()
    assert summary.success is True


def test_ensure_shell_already_set_does_not_prompt() -> None:
    shell = FakeShell(login_shell="/usr/bin/zsh")
    confirm, prompts = _always(True)

    outcome = ensure_shell(shell, Path("/usr/bin/zsh"), confirm)

    assert outcome is ShellChangeOutcome.ALREADY_SET
    assert prompts == []
    assert shell.change_shell_calls == []


def test_ensure_shell_changes_after_confirmation() -> None:
    shell = FakeShell(login_shell="/bin/bash")
    confirm, prompts = _always(True)

    outcome = ensure_shell(shell, Path("/usr/bin/zsh"), confirm)

    assert outcome is ShellChangeOutcome.CHANGED
    assert shell.change_shell_calls == ["/usr/bin/zsh"]
    assert "/bin/bash" in prompts[0]


def test_ensure_shell_declined_is_not_an_error() -> None:
    shell = FakeShell(login_shell="/bin/bash")
    confirm, _prompts = _always(False)

    outcome = ensure_shell(shell, Path("/usr/bin/zsh"), confirm)

    assert outcome is ShellChangeOutcome.DECLINED
    assert shell.change_shell_calls == []


def test_ensure_shell_failed_change_is_reported() -> None:
    shell = FakeShell(login_shell="/bin/bash", change_shell_succeeds=False)
    confirm, _prompts = _always(True)

    outcome = ensure_shell(shell, Path("/usr/bin/zsh"), confirm)

    assert outcome is ShellChangeOutcome.FAILED


def test_ensure_shell_treats_symlinked_paths_as_same(tmp_path: Path) -> None:
    real = tmp_path / "usr" / "bin" / "zsh"
    real.parent.mkdir(parents=True)
    real.touch()
    link_dir = tmp_path / "bin"
    link_dir.symlink_to(real.parent)
    shell = FakeShell(login_shell=str(link_dir / "zsh"))
    confirm, prompts = _always(True)

    outcome = ensure_shell(shell, real, confirm)

    assert outcome is ShellChangeOutcome.ALREADY_SET
    assert prompts == []
