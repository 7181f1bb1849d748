import jax
import jax.numpy as jnp

from nano_l1l2 import l1l2_learn, l1l2_path, predict


def run_test():
    # Sparse regression: 5 informative variables out of 50
    key = jax.random.PRNGKey(0)
    key, x_key, noise_key = jax.random.split(key, 3)

    num_samples = 100
    num_features = 50
    tau = 0.05

    X = jax.random.normal(x_key, (num_samples, num_features))
    true_w = jnp.zeros(num_features).at[:5].set(jnp.array([2.0, -1.5, 1.0, 3.0, -0.5]))
    noise = 0.1 * jax.random.normal(noise_key, (num_samples,))
    y = X @ true_w + 1.0 + noise

    print("Starting l1l2 fit with continuation...")
    result = l1l2_learn(X, y, tau, smooth_par=0.01, verbose=True)
    print("Selected variables:", jax.device_get(jnp.flatnonzero(result.coef)))
    print("Learned w (first 5):", jax.device_get(result.coef[:5]))
    print("Intercept:", float(result.intercept))
    print("Total iterations:", result.n_iter)

    debiased = l1l2_learn(X, y, tau, rls_par=0.0)
    print("De-biased w (first 5):", jax.device_get(debiased.coef[:5]))
    residual = y - predict(X, debiased.coef, debiased.intercept)
    print("Training MSE after de-biasing:", float(jnp.mean(residual**2)))

    print("Regularization path:")
    for t, res in zip([1.0, 0.5, 0.1, 0.05], l1l2_path(X, y, [1.0, 0.5, 0.1, 0.05])):
        print(f"  tau={t:.2f}: {int(jnp.count_nonzero(res.coef))} variables")


if __name__ == "__main__":
    run_test()
