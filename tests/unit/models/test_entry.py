"""Tests for the footprint Entry model."""

import dataclasses
import os
from pathlib import Path
from unittest.mock import patch

import pytest
from footprint.core.errors import (
    FormatError,
    IdentityLookupError,
    PathResolutionError,
    StatError,
)
from footprint.models.entry import (
    Entry,
    is_serializable_path,
    lookup_group_name,
    lookup_user_name,
)


class TestEntry:
    """Tests for Entry frozen dataclass."""

    def test_entry_frozen(self) -> None:
        """Entries cannot be modified after construction."""
        entry = Entry(permissions=0o644, path="/tmp/x", owner_name="root", group_name="root")

        with pytest.raises(dataclasses.FrozenInstanceError):
            entry.path = "/tmp/y"  # type: ignore[misc]

    def test_entries_compare_by_value(self) -> None:
        """Two entries with the same fields are equal."""
        a = Entry(permissions=0o644, path="/tmp/x", owner_name="root", group_name="wheel")
        b = Entry(permissions=0o644, path="/tmp/x", owner_name="root", group_name="wheel")
        assert a == b


class TestEntryFromFile:
    """Tests for Entry.from_file."""

    def test_from_file(self, tmp_path: Path, current_names: tuple[str, str]) -> None:
        """Entry captures permissions, absolute path and owner names."""
        target = tmp_path / "data.txt"
        target.write_text("x")
        target.chmod(0o640)

        with target.open() as handle:
            entry = Entry.from_file(handle)

        assert entry.permissions == 0o640
        assert entry.path == str(target)
        assert (entry.owner_name, entry.group_name) == current_names

    def test_from_file_relative_name_is_made_absolute(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        current_names: tuple[str, str],
    ) -> None:
        """A handle opened by relative name is tracked by absolute path."""
        monkeypatch.chdir(tmp_path)
        with open("relative.txt", "w") as handle:
            entry = Entry.from_file(handle)

        assert os.path.isabs(entry.path)
        assert entry.path == str(tmp_path / "relative.txt")

    def test_from_file_closed_handle(self, tmp_path: Path) -> None:
        """A closed handle cannot be stat'ed."""
        handle = (tmp_path / "closed.txt").open("w")
        handle.close()

        with pytest.raises(StatError):
            Entry.from_file(handle)

    def test_from_file_without_name(self, tmp_path: Path) -> None:
        """A handle with no usable name fails path resolution."""
        fd = os.open(tmp_path / "anon.txt", os.O_CREAT | os.O_WRONLY)
        with os.fdopen(fd, "w") as handle:
            with pytest.raises(PathResolutionError):
                Entry.from_file(handle)

    def test_from_file_unknown_owner(self, tmp_path: Path) -> None:
        """An orphaned uid fails the whole construction."""
        target = tmp_path / "orphan.txt"
        target.write_text("")

        with (
            patch("footprint.models.entry.pwd.getpwuid", side_effect=KeyError(4242)),
            target.open() as handle,
            pytest.raises(IdentityLookupError) as exc_info,
        ):
            Entry.from_file(handle)

        assert exc_info.value.kind == "user"

    def test_from_file_unknown_group(self, tmp_path: Path, current_names: tuple[str, str]) -> None:
        """An orphaned gid fails the whole construction."""
        target = tmp_path / "orphan.txt"
        target.write_text("")

        with (
            patch("footprint.models.entry.grp.getgrgid", side_effect=KeyError(4242)),
            target.open() as handle,
            pytest.raises(IdentityLookupError) as exc_info,
        ):
            Entry.from_file(handle)

        assert exc_info.value.kind == "group"


class TestEntryFromPath:
    """Tests for Entry.from_path."""

    def test_from_path(self, tmp_path: Path, current_names: tuple[str, str]) -> None:
        """Entry can be built from an existing path."""
        target = tmp_path / "bin"
        target.mkdir()
        target.chmod(0o750)

        entry = Entry.from_path(target)

        assert entry.permissions == 0o750
        assert entry.path == str(target)

    def test_from_path_missing(self, tmp_path: Path) -> None:
        """A missing path fails with StatError carrying the OS error."""
        with pytest.raises(StatError) as exc_info:
            Entry.from_path(tmp_path / "missing")

        assert isinstance(exc_info.value.__cause__, FileNotFoundError)


class TestEntryLineFormat:
    """Tests for Entry.to_line and Entry.from_line."""

    def test_to_line(self) -> None:
        """to_line renders permissions, owner/group and path tab-separated."""
        entry = Entry(permissions=0o755, path="/opt/app/run", owner_name="app", group_name="ops")

        assert entry.to_line() == "-rwxr-xr-x\tapp/ops\t/opt/app/run"
        assert str(entry) == entry.to_line()
        assert "\n" not in entry.to_line()

    def test_from_line(self) -> None:
        """from_line parses the three fields."""
        entry = Entry.from_line("drw-r-----\tapp/ops\t/var/lib/app")

        assert entry == Entry(
            permissions=0o640, path="/var/lib/app", owner_name="app", group_name="ops"
        )

    def test_from_line_path_verbatim(self) -> None:
        """Paths keep spaces and slashes exactly as written."""
        entry = Entry.from_line("-rw-r--r--\troot/root\t/srv/My Files/a b.txt ")
        assert entry.path == "/srv/My Files/a b.txt "

    @pytest.mark.parametrize(
        "line",
        [
            "",
            "-rw-r--r--",
            "-rw-r--r--\troot/root",
            "-rw-r--r--\troot/root\t/a\textra",
        ],
    )
    def test_from_line_wrong_field_count(self, line: str) -> None:
        """Lines without exactly three tab-separated fields are rejected."""
        with pytest.raises(FormatError, match="wrong field count") as exc_info:
            Entry.from_line(line)

        assert exc_info.value.line == line

    @pytest.mark.parametrize("owner_field", ["root", "root/wheel/extra", ""])
    def test_from_line_wrong_owner_field(self, owner_field: str) -> None:
        """The owner field must be exactly owner/group."""
        with pytest.raises(FormatError, match="wrong owner/group field"):
            Entry.from_line(f"-rw-r--r--\t{owner_field}\t/a")

    def test_from_line_bad_permissions_keeps_line(self) -> None:
        """Permission errors report the whole offending line."""
        line = "-rw-r--r-z\troot/root\t/a"

        with pytest.raises(FormatError) as exc_info:
            Entry.from_line(line)

        assert exc_info.value.char == "z"
        assert exc_info.value.line == line


class TestIdentityLookup:
    """Tests for lookup_user_name and lookup_group_name."""

    def test_lookup_user_name(self) -> None:
        """Known uids resolve through the password database."""
        with patch("footprint.models.entry.pwd.getpwuid") as getpwuid:
            getpwuid.return_value.pw_name = "alice"
            assert lookup_user_name(1000) == "alice"
        getpwuid.assert_called_once_with(1000)

    def test_lookup_group_name_unknown(self) -> None:
        """Unknown gids raise IdentityLookupError with the id."""
        with patch("footprint.models.entry.grp.getgrgid", side_effect=KeyError(99999)):
            with pytest.raises(IdentityLookupError) as exc_info:
                lookup_group_name(99999)

        assert exc_info.value.ident == 99999
        assert "99999" in str(exc_info.value)


class TestIsSerializablePath:
    """Tests for is_serializable_path."""

    @pytest.mark.parametrize("path", ["/tmp/plain", "/tmp/odd\rname", "/tmp/d[/]x", "relative"])
    def test_storable(self, path: str) -> None:
        """Carriage returns and brackets fit on one ledger line."""
        assert is_serializable_path(path)

    @pytest.mark.parametrize("path", ["/tmp/a\tb", "/tmp/a\nb", Path("x\ty")])
    def test_unstorable(self, path: str | Path) -> None:
        """Tabs and newlines would split the entry."""
        assert not is_serializable_path(path)
