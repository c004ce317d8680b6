"""
Shell Menu Commands

Implements the numbered menu entries. Each handler prompts for its
arguments, calls the explorer and prints the result.

Author: YSNRFD
Version: 1.0.0
"""

from dataclasses import dataclass
from typing import Callable, List

from fsbrowser.core.explorer import ListResult, OperationResult, PermissionInfo, SearchResult


RULE = "=" * 40


@dataclass
class MenuEntry:
    """One numbered menu entry."""
    choice: str
    label: str
    section: str
    handler: Callable[[], int]


class MenuCommands:
    """
    Menu commands of the explorer shell.

    Handlers return an exit code: 0 on success, 1 on failure.
    """

    def __init__(self, shell):
        """
        Args:
            shell: The shell instance
        """
        self._shell = shell
        self._entries: List[MenuEntry] = [
            MenuEntry('1', 'List files (simple)', 'Navigation & Listing', self.cmd_list),
            MenuEntry('2', 'List files (detailed)', 'Navigation & Listing', self.cmd_list_detailed),
            MenuEntry('3', 'Change directory', 'Navigation & Listing', self.cmd_cd),
            MenuEntry('4', 'Create file', 'File Operations', self.cmd_create_file),
            MenuEntry('5', 'Create directory', 'File Operations', self.cmd_create_directory),
            MenuEntry('6', 'Copy file', 'File Operations', self.cmd_copy),
            MenuEntry('7', 'Move file', 'File Operations', self.cmd_move),
            MenuEntry('8', 'Delete file/directory', 'File Operations', self.cmd_delete),
            MenuEntry('9', 'Search files (current directory)', 'Search', self.cmd_search),
            MenuEntry('10', 'Search files (recursive)', 'Search', self.cmd_search_recursive),
            MenuEntry('11', 'Show file permissions', 'Permissions', self.cmd_show_permissions),
            MenuEntry('12', 'Change file permissions', 'Permissions', self.cmd_change_permissions),
        ]
        self._commands: dict[str, Callable[[], int]] = {
            entry.choice: entry.handler for entry in self._entries
        }

    @property
    def entries(self) -> List[MenuEntry]:
        return self._entries

    def is_command(self, choice: str) -> bool:
        """Check if a menu choice exists."""
        return choice in self._commands

    def execute(self, choice: str) -> int:
        """
        Execute a menu entry.

        Args:
            choice: Menu number as typed by the user

        Returns:
            Exit code (127 for an unknown choice)
        """
        cmd = self._commands.get(choice)
        if cmd is None:
            print("Invalid choice! Please try again.")
            return 127
        return cmd()

    # Rendering

    @staticmethod
    def _report(result: OperationResult) -> int:
        print(result.message)
        return 0 if result.success else 1

    @staticmethod
    def render_listing(result: ListResult) -> None:
        """Print a listing the way the menu shows it."""
        print(f"\n{RULE}")
        print(f"Current Directory: {result.path}")
        print(RULE)

        print("\nDirectories:")
        for entry in result.directories:
            if result.detailed:
                print(f"  [DIR]  {entry.name:<20} | {entry.permissions}")
            else:
                print(f"  [DIR]  {entry.name}")

        print("\nFiles:")
        for entry in result.files:
            if result.detailed:
                print(f"  [FILE] {entry.name:<20} | {entry.permissions} | {entry.readable_size}")
            else:
                print(f"  [FILE] {entry.name}")

        print(f"\n{result.message}")

    @staticmethod
    def render_search(result: SearchResult) -> None:
        print(f"\nSearching for: {result.pattern} in {result.root}")
        print(RULE)
        print(result.message)
        for path in result.matches:
            print(f"  {path}")

    @staticmethod
    def render_permissions(info: PermissionInfo) -> None:
        print(f"\n{RULE}")
        print(info.message)
        print(RULE)
        print(f"Permissions: {info.symbolic}")
        print(f"Octal: {info.octal}")
        print(f"Owner: {info.owner}")
        print(f"Group: {info.group}")
        print(f"Size: {info.size}")

    # Command implementations

    def _list(self, detailed: bool) -> int:
        result = self._shell.explorer.list(detailed=detailed)
        if not result.success:
            return self._report(result)
        self.render_listing(result)
        return 0

    def cmd_list(self) -> int:
        """List files (names only)."""
        return self._list(detailed=False)

    def cmd_list_detailed(self) -> int:
        """List files with permissions and sizes."""
        return self._list(detailed=True)

    def cmd_cd(self) -> int:
        """Change directory."""
        path = input("Enter directory path (or .. for parent): ")
        return self._report(self._shell.explorer.change_directory(path))

    def cmd_create_file(self) -> int:
        """Create an empty file."""
        name = input("Enter filename to create: ")
        return self._report(self._shell.explorer.create_file(name))

    def cmd_create_directory(self) -> int:
        """Create a directory."""
        name = input("Enter directory name to create: ")
        return self._report(self._shell.explorer.create_directory(name))

    def cmd_copy(self) -> int:
        """Copy a file."""
        source = input("Enter source file: ")
        destination = input("Enter destination: ")
        return self._report(self._shell.explorer.copy(source, destination))

    def cmd_move(self) -> int:
        """Move a file."""
        source = input("Enter source file: ")
        destination = input("Enter destination: ")
        return self._report(self._shell.explorer.move(source, destination))

    def cmd_delete(self) -> int:
        """Delete a file or an empty directory, after confirmation."""
        target = input("Enter file/directory to delete: ")
        if self._shell.config.shell.confirm_delete:
            answer = input("Are you sure? (y/n): ")
            if answer not in ('y', 'Y'):
                print("Delete cancelled")
                return 0
        return self._report(self._shell.explorer.delete(target))

    def _search(self, recursive: bool) -> int:
        pattern = input("Enter search pattern: ")
        result = self._shell.explorer.search(pattern, recursive=recursive)
        if not result.success:
            return self._report(result)
        self.render_search(result)
        return 0

    def cmd_search(self) -> int:
        """Search the current directory."""
        return self._search(recursive=False)

    def cmd_search_recursive(self) -> int:
        """Search the current directory and everything below it."""
        return self._search(recursive=True)

    def cmd_show_permissions(self) -> int:
        """Show permissions of a file."""
        target = input("Enter filename: ")
        info = self._shell.explorer.show_permissions(target)
        if not info.success:
            return self._report(info)
        self.render_permissions(info)
        return 0

    def cmd_change_permissions(self) -> int:
        """Change permissions of a file."""
        target = input("Enter filename: ")
        octal = input("Enter permissions (octal, e.g., 755): ")
        return self._report(self._shell.explorer.change_permissions(target, octal))
