"""
fsbrowser Shell Module

The interactive numbered-menu shell.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional

from .builtins import MenuCommands
from fsbrowser.core.config_loader import Config, get_config
from fsbrowser.core.explorer import FileExplorer
from fsbrowser.logger import get_logger


EXIT_CHOICE = '0'


class Shell:
    """
    Explorer Interactive Shell.

    Shows the menu, reads a choice, runs the matching command and
    repeats until the user exits or input ends.

    Example:
        >>> shell = Shell(FileExplorer())
        >>> shell.run()
    """

    def __init__(self, explorer: Optional[FileExplorer] = None, config: Optional[Config] = None):
        self._config = config or get_config()
        self._explorer = explorer or FileExplorer(config=self._config)
        self._logger = get_logger('shell')
        self._commands = MenuCommands(self)
        self._running = False

    @property
    def explorer(self) -> FileExplorer:
        return self._explorer

    @property
    def config(self) -> Config:
        return self._config

    @property
    def commands(self) -> MenuCommands:
        return self._commands

    def display_menu(self) -> None:
        """Print the menu, grouped by section."""
        print("\n" + "=" * 40)
        print(f"  {self._config.app.name.upper()} - LINUX FILE EXPLORER")
        print("=" * 40)

        section = None
        for entry in self._commands.entries:
            if entry.section != section:
                section = entry.section
                print(f"\n[{section}]")
            print(f"  {entry.choice + '.':<4} {entry.label}")

        print(f"\n  {EXIT_CHOICE + '.':<4} Exit")
        print("\n" + "=" * 40)

    def run(self) -> None:
        """
        Run the interactive shell.

        This is the main REPL loop.
        """
        self._running = True
        print(self._config.app.welcome_message)

        while self._running:
            self.display_menu()
            print(f"Current Path: {self._explorer.cwd}")

            try:
                choice = input(self._config.shell.prompt).strip()
            except EOFError:
                print()
                break
            except KeyboardInterrupt:
                print("^C")
                continue

            if choice == EXIT_CHOICE:
                break

            try:
                self.execute(choice)
            except EOFError:
                print()
                break
            except KeyboardInterrupt:
                print("^C")
                continue

            if self._config.shell.pause_after_command:
                try:
                    input("\nPress Enter to continue...")
                except EOFError:
                    break
                except KeyboardInterrupt:
                    continue

        self._running = False
        print("\nThank you for using Linux File Explorer!")

    def execute(self, choice: str) -> int:
        """
        Execute one menu choice.

        Unexpected errors are logged and reported, never propagated,
        so the menu keeps running.

        Returns:
            Exit code of the command
        """
        try:
            code = self._commands.execute(choice)
        except (EOFError, KeyboardInterrupt):
            raise
        except Exception as e:
            self._logger.exception(f"Menu choice {choice} crashed", exc=e)
            print(f"Error: {e}")
            return 1

        self._logger.debug("Menu choice finished", context={'choice': choice, 'code': code})
        return code
