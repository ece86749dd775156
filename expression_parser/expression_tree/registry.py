import math
import threading
from typing import Dict, List, Optional

from .core.node import VariableNode

PI_NAME = 'pi'


class VariableRegistry:
  """Interns one VariableNode per name for the registry's lifetime"""

  def __init__(self):
    self._variables: Dict[str, VariableNode] = {}
    self._lock = threading.Lock()
    self.pi = self.lookup_or_create(PI_NAME)
    self.pi.set_value(math.pi)

  def lookup_or_create(self, name: str) -> VariableNode:
    """Return the variable called `name`, creating it at 0.0 on first use"""
    with self._lock:
      variable = self._variables.get(name)
      if variable is None:
        variable = VariableNode(name)
        self._variables[name] = variable
      return variable

  def get(self, name: str) -> Optional[VariableNode]:
    with self._lock:
      return self._variables.get(name)

  def names(self) -> List[str]:
    with self._lock:
      return sorted(self._variables)

  def __contains__(self, name: str) -> bool:
    with self._lock:
      return name in self._variables

  def __len__(self) -> int:
    with self._lock:
      return len(self._variables)

  def get_stats(self) -> dict:
    """Get registry statistics"""
    with self._lock:
      return {
        'variable_count': len(self._variables),
        'names': sorted(self._variables)
      }


# Global instance - process-local initialization with optimized locking
_GLOBAL_REGISTRY: Optional[VariableRegistry] = None
_REGISTRY_LOCK = threading.Lock()


def get_global_registry() -> VariableRegistry:
  """Get the process-wide registry, creating it on first use"""
  global _GLOBAL_REGISTRY

  # Fast path - no locking needed once initialized
  if _GLOBAL_REGISTRY is not None:
    return _GLOBAL_REGISTRY

  # Slow path - use lock only during initialization
  with _REGISTRY_LOCK:
    if _GLOBAL_REGISTRY is None:
      _GLOBAL_REGISTRY = VariableRegistry()

  return _GLOBAL_REGISTRY


def reset_global_registry():
  """Drop the process-wide registry; later lookups start from a fresh one"""
  global _GLOBAL_REGISTRY
  with _REGISTRY_LOCK:
    _GLOBAL_REGISTRY = None
