import itertools
import logging
import numpy as np
import diffevo as de

logging.basicConfig(level=logging.INFO)

rastrigin = de.functions.registry["rastrigin"]
bounds = rastrigin.bounds(30)

# run until the cost is below 0.1 (may never happen)
population = de.self_adaptive_de(bounds, rastrigin.function, random_state=12)
population.register_callback("eval", de.callbacks.OptimizationLogger(log_interval_evaluations=20000))
population.minimize(threshold=0.1, budget=200000)

# same thing with the iterator: at most 100000 evaluations or cost below 0.1
population = de.self_adaptive_de(bounds, rastrigin.function, random_state=12)
next((cost for cost in itertools.islice(population.iter(), 100000) if cost < 0.1), None)
cost, position = population.best()
distance = np.linalg.norm(position - rastrigin.optimum_position(len(bounds)))
print(f"{cost} best cost after {population.num_cost_evaluations} evaluations")
print(f"{distance} distance to the global minimum")
