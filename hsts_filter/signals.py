"""
HSTS policy signals.

Lets other parts of a project react to a reconfiguration, for example to
tell sibling worker processes to reload the policy.
"""

from django.dispatch import Signal

policy_changed = Signal()
"""
Fired after a new policy has been published in memory and the save has been
attempted. Receiver errors are logged and never interrupt the change.

Provides arguments:
    sender: The PolicyStore class
    store: The PolicyStore instance
    policy: The new Policy
    previous: The Policy it replaced
    saved: False when the policy could not be persisted
"""
