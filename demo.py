import marimo

__generated_with = "0.17.6"
app = marimo.App(width="medium")


@app.cell
def _():
    import marimo as mo
    import sys
    from pathlib import Path

    # Make the package importable when run from a checkout
    project_root = Path.cwd()
    if not (project_root / 'label_kmeans').exists():
        if (project_root / 'label-kmeans' / 'label_kmeans').exists():
            project_root = project_root / 'label-kmeans'

    sys.path.insert(0, str(project_root))

    from label_kmeans.data_loader import DataLoader
    from label_kmeans.kmeans import KMeans, KMeansConfig
    from label_kmeans.report import format_iteration
    from label_kmeans.viz import plot_cluster_purity, plot_convergence
    return (
        DataLoader,
        KMeans,
        KMeansConfig,
        format_iteration,
        mo,
        plot_cluster_purity,
        plot_convergence,
    )


@app.cell
def _(mo):
    mo.md("""
    # K-Means with label purity

    Lloyd's algorithm over a labeled, comma-delimited dataset. Each record
    holds numeric features followed by a ground-truth label; the labels are
    ignored by the clustering and only used to measure how pure each cluster is.
    """)
    return


@app.cell
def _(mo):
    file_input = mo.ui.text(value="data/iris_sample.data", label="Data file")
    k_input = mo.ui.slider(1, 10, value=3, label="k")
    seed_input = mo.ui.number(value=42, label="Random seed")
    mo.vstack([file_input, k_input, seed_input])
    return file_input, k_input, seed_input


@app.cell
def _(DataLoader, file_input):
    loader = DataLoader()
    dataset = loader.load(file_input.value)
    dataset.n_points, dataset.n_attributes, dataset.distinct_labels()
    return (dataset,)


@app.cell
def _(KMeans, KMeansConfig, dataset, k_input, seed_input):
    config = KMeansConfig(
        n_clusters=k_input.value,
        random_state=int(seed_input.value),
        max_iter=500
    )
    kmeans = KMeans.from_config(dataset, config)

    # Step manually to keep every iteration for the report
    iterations = []
    while not kmeans.converged and kmeans.n_iter < config.max_iter:
        iterations.append(kmeans.step())
    return config, iterations, kmeans


@app.cell
def _(format_iteration, iterations, mo):
    report = "\n".join(
        line for it in iterations for line in format_iteration(it)
    )
    mo.md(f"```\n{report}\n```")
    return


@app.cell
def _(config, kmeans, plot_convergence):
    fig_conv, _ = plot_convergence(kmeans.history, tol=config.tol)
    fig_conv
    return


@app.cell
def _(iterations, plot_cluster_purity):
    fig_purity, _ = plot_cluster_purity(iterations[-1].purities)
    fig_purity
    return


if __name__ == "__main__":
    app.run()
