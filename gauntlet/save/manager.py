"""
Save/Load system - player progress persistence.

Provides:
- Save/load of the player to a plain text file, one field per line
- Validation of loaded values
- Fallback to a fresh player when a save cannot be used
- Event publishing for save/load operations

File layout:
    name
    health
    max_health
    attack_power
    level
    experience
    experience_to_next_level
    item count
    one item name per line
"""

from __future__ import annotations

import logging
from enum import Enum, auto
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from rpg_engine.core.events import EventBus
from rpg_engine.errors import SaveFileError
from gauntlet.battle.actions import ITEMS
from gauntlet.components import Experience, Health
from gauntlet.rules import DEFAULT_SAVE_FILE

if TYPE_CHECKING:
    from gauntlet.player import Player

logger = logging.getLogger(__name__)


class SaveEvent(Enum):
    """Save system events."""
    SAVE_COMPLETED = auto()
    SAVE_FAILED = auto()
    LOAD_COMPLETED = auto()
    LOAD_FAILED = auto()


class PlayerSaveData(BaseModel):
    """Saved data for the player."""
    model_config = ConfigDict(extra='forbid')

    name: str = Field(min_length=1)
    health: int = Field(gt=0)
    max_health: int = Field(gt=0)
    attack_power: int = Field(gt=0)
    level: int = Field(gt=0)
    experience: int = Field(ge=0)
    experience_to_next_level: int = Field(gt=0)
    items: list[str] = Field(default_factory=list)

    @classmethod
    def from_player(cls, player: Player) -> PlayerSaveData:
        return cls.model_construct(
            name=player.name,
            health=player.health.current,
            max_health=player.health.max_hp,
            attack_power=player.attack_power,
            level=player.experience.level,
            experience=player.experience.current,
            experience_to_next_level=player.experience.to_next_level,
            items=list(player.inventory),
        )

    def to_lines(self) -> list[str]:
        return [
            self.name,
            str(self.health),
            str(self.max_health),
            str(self.attack_power),
            str(self.level),
            str(self.experience),
            str(self.experience_to_next_level),
            str(len(self.items)),
            *self.items,
        ]

    @classmethod
    def from_lines(cls, lines: list[str]) -> PlayerSaveData:
        """
        Parse the file layout.

        Raises:
            SaveFileError: Missing fields, non-numeric values, bad item
                list or values outside their valid range
        """
        if len(lines) < 8:
            raise SaveFileError("Invalid save file format.")

        try:
            numbers = [int(line.strip()) for line in lines[1:8]]
        except ValueError:
            raise SaveFileError("Invalid save file format.") from None

        item_count = numbers[6]
        items = lines[8:8 + max(item_count, 0)]
        if item_count < 0 or len(items) != item_count or any(not item.strip() for item in items):
            raise SaveFileError("Invalid item in save file.")

        try:
            return cls(
                name=lines[0].strip(),
                health=numbers[0],
                max_health=numbers[1],
                attack_power=numbers[2],
                level=numbers[3],
                experience=numbers[4],
                experience_to_next_level=numbers[5],
                items=[item.strip() for item in items],
            )
        except ValidationError:
            raise SaveFileError("Invalid values in save file.") from None


class SaveManager:
    """
    Saves and loads the player.

    Neither operation raises: failures are logged, published and
    reported through the return value and ``last_error``. A failed
    load resets the player so a game can always start.

    Usage:
        save_mgr = SaveManager("savegame.txt", event_bus=event_bus)
        save_mgr.save(player)
        if not save_mgr.load(player):
            print(save_mgr.last_error)
    """

    def __init__(self, save_path: str | Path = DEFAULT_SAVE_FILE, event_bus: Optional[EventBus] = None):
        self.save_path = Path(save_path)
        self.event_bus = event_bus
        self.last_error: Optional[str] = None

    def _publish(self, event_type: SaveEvent, **data) -> None:
        if self.event_bus:
            self.event_bus.publish(event_type, path=str(self.save_path), **data)

    def save(self, player: Player) -> bool:
        """
        Write the player's progress.

        Returns:
            True if the file was written
        """
        self.last_error = None
        data = PlayerSaveData.from_player(player)

        try:
            self.save_path.parent.mkdir(parents=True, exist_ok=True)
            self.save_path.write_text("\n".join(data.to_lines()) + "\n", encoding="utf-8")
        except OSError as e:
            self.last_error = f"Unable to open save file: {e}"
            logger.error("Save to %s failed: %s", self.save_path, e)
            self._publish(SaveEvent.SAVE_FAILED, error=self.last_error)
            return False

        logger.info("Saved %s (level %d) to %s", data.name, data.level, self.save_path)
        self._publish(SaveEvent.SAVE_COMPLETED, name=data.name)
        return True

    def read(self) -> PlayerSaveData:
        """
        Read and validate the save file.

        Raises:
            SaveFileError: Missing, unreadable or invalid file
        """
        if not self.save_path.is_file():
            raise SaveFileError("No save file found.")

        try:
            text = self.save_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SaveFileError(f"Unable to read save file: {e}") from e

        return PlayerSaveData.from_lines(text.splitlines())

    def load(self, player: Player) -> bool:
        """
        Load progress into ``player``.

        On any failure the player is reset to starting stats.

        Returns:
            True if the save was applied
        """
        self.last_error = None

        try:
            data = self.read()
        except SaveFileError as e:
            self.last_error = str(e)
            logger.warning("Load from %s failed (%s); starting a new game", self.save_path, e)
            player.reset()
            self._publish(SaveEvent.LOAD_FAILED, error=self.last_error)
            return False

        self._apply(player, data)
        logger.info("Loaded %s (level %d) from %s", data.name, data.level, self.save_path)
        self._publish(SaveEvent.LOAD_COMPLETED, name=data.name)
        return True

    def _apply(self, player: Player, data: PlayerSaveData) -> None:
        """Restore saved fields; battle state starts clean."""
        player.name = data.name
        player.health = Health(current=data.health, max_hp=data.max_health)
        player.attack_power = data.attack_power
        player.experience = Experience(
            current=data.experience,
            level=data.level,
            to_next_level=data.experience_to_next_level,
        )
        player.combat.clear_all()

        player.inventory.clear()
        for item in data.items:
            if item not in ITEMS:
                logger.warning("Unknown item %r in save file; it cannot be used in battle", item)
            if not player.inventory.add_item(item):
                logger.warning("Inventory full, dropping saved item %r", item)
