import structlog
from shared.observability import product_mirror_compensation_total

logger = structlog.get_logger(__name__)

class SagaStep:
    def __init__(self, name, action, compensation=None):
        self.name = name
        self.action = action
        self.compensation = compensation

class SagaOrchestrator:
    def __init__(self):
        self.steps = []

    def add_step(self, name: str, action, compensation=None):
        """Builder pattern to add a step and its rollback compensation."""
        self.steps.append(SagaStep(name, action, compensation))
        return self

    async def execute(self, ctx: dict):
        """Runs steps in order. On failure, compensates the completed ones and re-raises."""
        executed_steps = []
        for step in self.steps:
            try:
                await step.action(ctx)
            except Exception as e:
                logger.error("saga_step_failed", step=step.name, error=str(e))
                await self._rollback(executed_steps, ctx)
                raise
            executed_steps.append(step)
        return True

    async def _rollback(self, executed_steps: list, ctx: dict):
        """Executes compensations in reverse order. Wraps each in a try/except."""
        logger.info("saga_rollback_started", steps=[s.name for s in executed_steps])
        for step in reversed(executed_steps):
            if not step.compensation:
                continue
            try:
                await step.compensation(ctx)
                logger.info("saga_compensation_succeeded", step=step.name)
                product_mirror_compensation_total.labels(step_name=step.name).inc()
            except Exception as ce:
                # A failing compensation must not block the remaining ones
                logger.critical("saga_compensation_failed", step=step.name, error=str(ce))
