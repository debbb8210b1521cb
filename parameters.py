# model parameters
S0 = 1868.99              # starting price
K = 1870.0                # strike price
sigma = 0.2979            # volatility
r = 0.003866              # risk-free rate
q = 0.0232                # expected dividend yield
T = 1.0 / 52.0            # time to maturity (one week)

# sweep parameters
direct_runs = 6           # number of direct simulation runs
direct_base_R = 1000      # replicates in the first direct run
antithetic_runs = 5       # number of antithetic simulation runs
antithetic_base_R = 4000  # replicates in the first antithetic run
multiplier = 10           # replicate growth factor between runs

# estimator parameters
z_95 = 1.96               # 95% confidence multiplier
chunk_size = 100_000      # draws pulled from the generator per batch

# reproducibility; None seeds from OS entropy
seed = None
