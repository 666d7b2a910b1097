from ..models.odometry_state import IntegrationMode


class IntegrationModeSelector:
    """Active integration scheme, updated from the configuration channel."""

    def __init__(self, mode: IntegrationMode = IntegrationMode.EULER, logger=None):
        self.logger = logger
        # A single reference; assignment and reads are atomic.
        self._mode = mode

    def set_mode(self, value) -> bool:
        """
        Switch scheme. Values that do not name a scheme are ignored.

        Returns:
            bool: True if the mode changed
        """
        mode = IntegrationMode.parse(value)
        if mode is None or mode is self._mode:
            return False
        self._mode = mode
        if self.logger:
            self.logger.info(f'Integration method set to {mode.method_name}')
        return True

    def get_mode(self) -> IntegrationMode:
        return self._mode
