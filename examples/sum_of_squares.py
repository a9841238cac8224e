import diffevo as de


def sum_of_squares(x):
    return float(sum(x * x))


# initial search area from -10 to 10 in 5 dimensions
population = de.self_adaptive_de([(-10.0, 10.0)] * 5, sum_of_squares)
population.minimize(budget=10000)
cost, position = population.best()
print(f"cost: {cost}")
print(f"position: {position}")
