"""bencomp quickstart example."""

import bencomp
from bencomp.visualization import ResultReport


def main():
    print("=" * 60)
    print("bencomp Quickstart Example")
    print("=" * 60)

    # Shape of the generated JSON tree
    config = bencomp.ShapeConfig(
        fields_per_node=bencomp.parse_range("2-4"),
        degree=bencomp.parse_range("1-3"),
        max_depth=4,
        string_length=bencomp.parse_range("4-12"),
        string_source=bencomp.StringSource.generated(64),
    ).validate()

    print("\n🌳 Generating a tree...")
    rng = bencomp.RandomSource(seed=42)
    tree = bencomp.generate_tree(config, rng=rng)
    payload = bencomp.serialize_tree(tree)
    print(f"✓ Nodes: {tree.count_nodes()}")
    print(f"✓ Depth: {tree.depth()}")
    print(f"✓ Serialized size: {len(payload)} bytes")

    # Five trials, each on a freshly generated tree
    print("\n⏱  Benchmarking gzip, zlib and zstd (5 trials)...")
    source = bencomp.GeneratedInput(config, bencomp.RandomSource(seed=42))
    run = bencomp.run_benchmark(source, count=5)

    options = bencomp.ReportOptions(
        show_compress_time=True,
        network_bandwidth=bencomp.parse_bandwidth("128KB"),
        network_payloads=100,
    )
    ResultReport().render(run.results, len(run.input_data), options)

    print("\n📦 Estimated time for 100 payloads at 128KB/s:")
    for result in run.results:
        seconds = bencomp.batch_time(result, 100, options.network_bandwidth)
        print(f"  {result.name:<24} {seconds:.3f}s")

    print("\n" + "=" * 60)
    print("✓ Quickstart complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
