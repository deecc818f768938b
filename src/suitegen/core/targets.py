"""Target resolution: merging suite and snippet selector bindings."""

from collections.abc import Mapping

from suitegen.core.models import Target
from suitegen.core.schema import Composer


class TargetResolver:
    """Merges suite-level and snippet-level target bindings.

    Suite bindings take precedence over snippet bindings with the same name.
    Snippet-only targets are kept so inlined snippet commands still resolve.
    Targets without a name or a selector are ignored.
    """

    def __init__(
        self,
        suite_targets: Mapping[str, Target],
        snippet_targets: Mapping[str, Target] | None = None,
    ) -> None:
        self._suite_targets = [t for t in suite_targets.values() if t.is_declarable]
        self._snippet_targets = [
            t for t in (snippet_targets or {}).values() if t.is_declarable
        ]

    def selector_table(self) -> dict[str, str]:
        """Flat name -> selector mapping, suite bindings winning."""
        table: dict[str, str] = {}
        for target in self._snippet_targets + self._suite_targets:
            table[target.name] = target.selector
        return table

    def declarations(self) -> list[Target]:
        """Targets to declare: snippet-only targets first, then the suite's."""
        suite_ids = {t.id for t in self._suite_targets}
        suite_names = {t.name for t in self._suite_targets}
        snippet_only = [
            t
            for t in self._snippet_targets
            if t.id not in suite_ids and t.name not in suite_names
        ]
        return snippet_only + self._suite_targets

    def render_declarations(self, composer: Composer) -> str:
        """Render the target-declaration block with the composer."""
        return "\n".join(composer.query(target) for target in self.declarations())
