"""
Be sure you have toynet installed in you Virtual Env.
>>> pip install -Ue .
"""
import toynet
from toynet.datasets import datasets


def default_log_fn(point, label, output):
    print("Point ", point, " label ", label, " output ", output)


class NetworkRun:
    def __init__(self, hidden_sizes, seed=None):
        self.hidden_sizes = hidden_sizes
        self.model = toynet.NeuralNet(
            2,
            hidden_sizes,
            1,
            initializer=toynet.random_uniform(seed=seed),
        )

    def run_one(self, x):
        return self.model.forward(list(x))[0]

    def run_many(self, X):
        return [self.run_one(x) for x in X]

    def run(self, data, log_fn=default_log_fn):
        outputs = self.run_many(data.X)
        correct = 0
        for x, y, out in zip(data.X, data.y, outputs):
            log_fn(x, y, out)
            correct += int((out > 0.5) == (y == 1))
        return correct


if __name__ == "__main__":
    PTS = 20
    HIDDEN = [3, 4]
    data = datasets["Simple"](PTS, seed=1)
    correct = NetworkRun(HIDDEN, seed=1).run(data)
    print("correct", correct, "of", PTS)
