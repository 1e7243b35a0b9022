"""Dynamic weight calculation for Create operations.

Weights rank the phrases sharing a code; a new phrase is appended after the
current maximum. To predict the weight a Create will receive once the batch
is applied, the other batch operations on the same code are replayed over a
snapshot of the store's weights without touching the store.

The replay is a fold over an immutable WeightSimulation, so each step can be
tested on its own.
"""

from collections import Counter
from collections.abc import Collection, Mapping
from dataclasses import dataclass, field
from functools import reduce

from rimeguard.core.phrase_types import get_default_weight
from rimeguard.core.types import BatchPRItem, Phrase, PRAction
from rimeguard.store.base import PhraseStore
from rimeguard.utils.debug import log_if_debug_code


@dataclass(frozen=True)
class WeightSimulation:
    """Weights occupied on one code, and which word holds each weight.

    Phrases on a code may share a weight, so ``occupied`` counts how many
    phrases hold each weight. A weight stays occupied until its count drops
    to zero.
    """

    occupied: Counter[int] = field(default_factory=Counter)
    word_weights: Mapping[str, int] = field(default_factory=dict)

    @classmethod
    def from_phrases(cls, phrases: list[Phrase]) -> "WeightSimulation":
        """Snapshot the weights of the phrases stored on a code."""
        return cls(
            occupied=Counter(phrase.weight for phrase in phrases),
            word_weights={phrase.word: phrase.weight for phrase in phrases},
        )

    def append_weight(self, base_weight: int) -> int:
        """Weight for a phrase appended after every occupied slot, at least base_weight."""
        return max(max(self.occupied, default=base_weight - 1), base_weight - 1) + 1

    def next_weight(self, base_weight: int) -> int:
        """Weight the next new phrase receives; base_weight on an empty code."""
        if not self.occupied:
            return base_weight
        return max(self.occupied) + 1

    def occupy(self, word: str, weight: int) -> "WeightSimulation":
        return WeightSimulation(
            occupied=self.occupied + Counter({weight: 1}),
            word_weights={**self.word_weights, word: weight},
        )

    def free(self, word: str) -> "WeightSimulation":
        """Release one holder of word's weight, if word has one."""
        if word not in self.word_weights:
            return self
        weight = self.word_weights[word]
        # Counter subtraction drops weights whose count reaches zero
        return WeightSimulation(
            occupied=self.occupied - Counter({weight: 1}),
            word_weights={w: v for w, v in self.word_weights.items() if w != word},
        )

    def rename(self, old_word: str, new_word: str) -> "WeightSimulation":
        """Move old_word's weight to new_word; occupied slots are unchanged."""
        if old_word not in self.word_weights:
            return self
        word_weights = {w: v for w, v in self.word_weights.items() if w != old_word}
        word_weights[new_word] = self.word_weights[old_word]
        return WeightSimulation(occupied=self.occupied, word_weights=word_weights)


def replay_operation(
    simulation: WeightSimulation,
    operation: BatchPRItem,
    index: int,
    current_index: int,
    base_weight: int,
) -> WeightSimulation:
    """Apply one batch operation to the simulation.

    Only Creates before the current item take a slot; Deletes and Changes
    count wherever they sit in the batch.

    Args:
        simulation: State before the operation
        operation: The batch item to replay (assumed to target the same code)
        index: Position of the operation in the batch
        current_index: Position of the item whose weight is being calculated
        base_weight: Base weight of the item being calculated

    Returns:
        State after the operation
    """
    if operation.action is PRAction.CREATE:
        if index < current_index and operation.word not in simulation.word_weights:
            return simulation.occupy(operation.word, simulation.append_weight(base_weight))
        return simulation
    if operation.action is PRAction.DELETE:
        return simulation.free(operation.word)
    if operation.action is PRAction.CHANGE:
        if operation.old_word is None:
            return simulation
        return simulation.rename(operation.old_word, operation.word)
    raise ValueError(f"Unhandled action: {operation.action}")


def replay_batch(
    simulation: WeightSimulation,
    items: list[BatchPRItem],
    current_index: int,
    base_weight: int,
) -> WeightSimulation:
    """Replay every other item on the current item's code, in batch order."""
    code = items[current_index].code
    relevant = [
        (index, item)
        for index, item in enumerate(items)
        if index != current_index and item.code == code
    ]
    return reduce(
        lambda sim, entry: replay_operation(sim, entry[1], entry[0], current_index, base_weight),
        relevant,
        simulation,
    )


def _renamed_away_earlier(item: BatchPRItem, items: list[BatchPRItem], current_index: int) -> bool:
    """Whether an earlier Change renames item's exact (word, code) to another word."""
    return any(
        other.action is PRAction.CHANGE
        and other.code == item.code
        and other.old_word == item.word
        and other.word != item.word
        for other in items[:current_index]
    )


def calculate_dynamic_weight(
    item: BatchPRItem,
    all_items: list[BatchPRItem],
    current_index: int,
    store: PhraseStore,
    type_weights: Mapping[str, int] | None = None,
    debug_codes: Collection[str] | None = None,
) -> int:
    """Predict the weight item receives once the batch is applied.

    Args:
        item: The item being calculated (normally a Create)
        all_items: The whole batch
        current_index: Position of item in the batch
        store: Phrase store to read the code's current weights from
        type_weights: Optional per-type base weight overrides
        debug_codes: Codes to trace

    Returns:
        The explicit weight (or 0) for an untyped item; the stored weight when
        re-adding an unchanged existing pair; otherwise the next free weight
        after replaying the batch
    """
    if item.type is None:
        return item.weight or 0

    if item.action is PRAction.CREATE:
        existing = store.find_one(word=item.word, code=item.code)
        if existing is not None and not _renamed_away_earlier(item, all_items, current_index):
            log_if_debug_code(
                item.code,
                f"'{item.word}' already stored, keeping weight {existing.weight}",
                debug_codes,
                "Weight",
            )
            return existing.weight

    base_weight = get_default_weight(item.type, type_weights)
    initial = WeightSimulation.from_phrases(store.find_many(item.code))
    final = replay_batch(initial, all_items, current_index, base_weight)
    weight = final.next_weight(base_weight)

    log_if_debug_code(
        item.code,
        f"'{item.word}' (#{current_index + 1}): base {base_weight}, "
        f"occupied {sorted(initial.occupied.elements())} -> {sorted(final.occupied.elements())}, "
        f"weight {weight}",
        debug_codes,
        "Weight",
    )
    return weight
