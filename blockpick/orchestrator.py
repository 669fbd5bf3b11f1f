"""
Pick-Place Orchestrator
=======================
Sequential state machine for one pick-place cycle.

States: RESET → PICKING ⇄ PICK_FAILED → PICK_DONE →
        PLACING ⇄ PLACE_FAILED → PLACE_DONE → COMPLETE

A failed pick resets the block in the scene before retrying. A failed
place does not, since the block is already in the gripper. COMPLETE is
reached on every path and emits the completion signal exactly once.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional

from .block import BLOCK_SIZE, Block, create_block
from .context import OrchestrationContext
from .executor import AttemptOutcome
from .grasp.grasp_generator import generate_grasp_candidates
from .grasp.placement import generate_placement_candidates


RESET = "RESET"
PICKING = "PICKING"
PICK_FAILED = "PICK_FAILED"
PICK_DONE = "PICK_DONE"
PLACING = "PLACING"
PLACE_FAILED = "PLACE_FAILED"
PLACE_DONE = "PLACE_DONE"
COMPLETE = "COMPLETE"

STATES = [RESET, PICKING, PICK_FAILED, PICK_DONE, PLACING, PLACE_FAILED, PLACE_DONE, COMPLETE]


@dataclass
class CycleResult:
    """Summary of one pick-place cycle."""
    block_name: str
    success: bool = False
    picked: bool = False
    placed: bool = False
    pick_attempts: int = 0
    place_attempts: int = 0
    aborted_stage: Optional[str] = None  # "pick" or "place"
    last_outcome: Optional[AttemptOutcome] = None
    states: List[str] = field(default_factory=list)

    @property
    def state(self) -> Optional[str]:
        return self.states[-1] if self.states else None

    def to_dict(self):
        return {
            'block_name': self.block_name,
            'success': self.success,
            'picked': self.picked,
            'placed': self.placed,
            'pick_attempts': self.pick_attempts,
            'place_attempts': self.place_attempts,
            'aborted_stage': self.aborted_stage,
            'states': list(self.states),
        }


class PickPlaceOrchestrator:
    """Drives pick and place retry loops for one block per invocation."""

    def __init__(self, context: OrchestrationContext,
                 on_complete: Optional[Callable[[], None]] = None):
        """
        Args:
            context: Service handles and configuration
            on_complete: Called once at the end of every cycle
        """
        self.ctx = context
        self.on_complete = on_complete

    def run(self, x: Optional[float] = None, y: Optional[float] = None,
            name: Optional[str] = None) -> CycleResult:
        """Run a cycle for a block at (x, y); defaults come from the config."""
        config = self.ctx.config
        block = create_block(
            config.block_x if x is None else x,
            config.block_y if y is None else y,
            name or config.block_name,
        )
        return self.run_block(block.with_goal_offset(*config.goal_offset))

    def run_block(self, block: Block) -> CycleResult:
        """
        Pick block at its start pose and place it at its goal pose.

        Returns:
            CycleResult; the completion signal has been emitted on return
        """
        if block.goal_pose is None:
            raise ValueError(f"Block '{block.name}' has no goal pose")

        result = CycleResult(block_name=block.name)
        if self.ctx.logger is not None:
            self.ctx.logger.start_cycle(block)

        try:
            self._transition(result, RESET)
            self.ctx.scene.set_muted(False)
            self.reset_block(block)

            print(f"[PICK_PLACE] Picking '{block.name}'")
            self.ctx.scene.publish_block(block.start_pose, "blue", BLOCK_SIZE)
            if self._pick_loop(block, result):
                result.picked = True
                self._transition(result, PICK_DONE)
                print("[PICK_PLACE] Done with pick ---------------------------")

                print(f"[PICK_PLACE] Placing '{block.name}'")
                self.ctx.scene.publish_block(block.goal_pose, "blue", BLOCK_SIZE)
                if self._place_loop(block, result):
                    result.placed = True
                    self._transition(result, PLACE_DONE)
                    print("[PICK_PLACE] Done with place ----------------------------")
        finally:
            result.success = result.picked and result.placed
            try:
                self._transition(result, COMPLETE)
                if self.ctx.logger is not None:
                    self.ctx.logger.end_cycle(result)
            finally:
                # Completion is signalled even when the run log cannot be written
                if self.on_complete is not None:
                    self.on_complete()
                print("[PICK_PLACE] Finish. ----------------------------")

        return result

    def reset_block(self, block: Block) -> None:
        """Remove any attached/collision copy of the block and re-add it at its start pose."""
        scene = self.ctx.scene
        scene.cleanup_attached_object(block.name)
        scene.cleanup_collision_object(block.name)
        scene.publish_collision_block(block.start_pose, block.name, BLOCK_SIZE)
        self.ctx.log_event('scene_reset', {'block': block.name})

    def _pick_loop(self, block: Block, result: CycleResult) -> bool:
        retry = self.ctx.retry
        retry.reset()
        while True:
            if self.ctx.shutdown_event.is_set():
                result.aborted_stage = "pick"
                return False

            self._transition(result, PICKING)
            result.pick_attempts += 1
            outcome = self._attempt_pick(block)
            result.last_outcome = outcome
            self.ctx.log_event('pick_attempt', {'attempt': result.pick_attempts, **outcome.to_dict()})
            if outcome:
                return True

            print(f"[PICK_PLACE] Pick failed ({outcome.reason or 'no reason given'}).")
            self._transition(result, PICK_FAILED)
            if not retry.should_retry():
                result.aborted_stage = "pick"
                return False
            self.reset_block(block)

    def _place_loop(self, block: Block, result: CycleResult) -> bool:
        retry = self.ctx.retry
        retry.reset()
        while True:
            if self.ctx.shutdown_event.is_set():
                result.aborted_stage = "place"
                return False

            self._transition(result, PLACING)
            result.place_attempts += 1
            outcome = self._attempt_place(block)
            result.last_outcome = outcome
            self.ctx.log_event('place_attempt', {'attempt': result.place_attempts, **outcome.to_dict()})
            if outcome:
                return True

            print(f"[PICK_PLACE] Place failed ({outcome.reason or 'no reason given'}).")
            self._transition(result, PLACE_FAILED)
            if not retry.should_retry():
                result.aborted_stage = "place"
                return False

    def _attempt_pick(self, block: Block) -> AttemptOutcome:
        allowed_touch = list(self.ctx.config.known_blocks) + [block.name]
        grasps = generate_grasp_candidates(
            self.ctx.grasp_generator, block.start_pose, self.ctx.grasp_data, allowed_touch
        )
        if not grasps:
            return AttemptOutcome(success=False, reason="no_grasp_candidates")
        return self.ctx.executor.execute_pick(block.name, grasps)

    def _attempt_place(self, block: Block) -> AttemptOutcome:
        locations = generate_placement_candidates(
            block.goal_pose, self.ctx.grasp_data, self.ctx.grasp_data.base_link
        )
        return self.ctx.executor.execute_place(block.name, locations)

    def _transition(self, result: CycleResult, state: str) -> None:
        previous = result.state
        result.states.append(state)
        if previous is not None:
            print(f"[PICK_PLACE] State transition: {previous} → {state}")
        self.ctx.log_event('state_transition', {'from': previous, 'to': state})
