from abc import ABC, abstractmethod


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for path exclusion rules.

    The directory scanner only needs a predicate over relative paths, so any object
    implementing ``exclude`` can be used to filter a scan. The bundled implementation
    is :class:`gtree.exclusion_rules.ignore_set.IgnoreSet`.

    Example:
        >>> class NoLogs(BaseExclusionRules):
        ...     def exclude(self, path: str) -> bool:
        ...         return path.endswith('.log')
        >>> NoLogs().exclude('build/app.log')
        True
        >>> NoLogs().exclude('main.py')
        False
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a given path should be excluded.

        Args:
            path (str): The file or directory path to check, relative to the root of
                the scan and using forward slashes as separators.

        Returns:
            bool: True if the path should be excluded, False if it should be included.
        """
        pass
