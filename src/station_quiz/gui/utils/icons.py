"""Material Design icons via QtAwesome."""
import qtawesome as qta
from station_quiz.gui.styles.theme import get_colors


class MaterialIcons:
    """Centralized Material Design icon definitions using QtAwesome."""

    @staticmethod
    def back(color=None):
        """Previous question icon."""
        return qta.icon('mdi6.arrow-left', color=color or get_colors().TEXT_PRIMARY)

    @staticmethod
    def next(color=None):
        """Next question icon."""
        return qta.icon('mdi6.arrow-right', color=color or get_colors().TEXT_ON_PRIMARY)

    @staticmethod
    def map(color=None):
        """Open route in maps icon."""
        return qta.icon('mdi6.map-marker-path', color=color or get_colors().TEXT_PRIMARY)

    @staticmethod
    def train():
        """Header logo icon."""
        return qta.icon('mdi6.train', color=get_colors().PRIMARY)

    @staticmethod
    def chevron(expanded: bool):
        """Hint card expand/collapse indicator."""
        name = 'mdi6.chevron-up' if expanded else 'mdi6.chevron-down'
        return qta.icon(name, color=get_colors().TEXT_SECONDARY)

    @staticmethod
    def alert():
        """Empty/error state icon."""
        return qta.icon('mdi6.alert-circle-outline', color=get_colors().ERROR)
