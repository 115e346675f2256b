#!/usr/bin/env python3
"""
Lexer Throughput Benchmark
==========================

Measures how fast golex tokenizes synthetic Go sources of increasing size.

Features:
- Reproducible synthetic sources (seeded)
- Tokens/second and characters/second per run
- Memory usage tracking
- Statistical summary across runs
"""

import time
import numpy as np
import psutil
import platform
from typing import List
from dataclasses import dataclass
from contextlib import contextmanager
import gc
import sys
import os

# Add the project root to the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from golex.lexer import Lexer, LexerConfig, DEFAULT_CONFIG, RecognizerRule, TokenType


# Fragments mixing every token category, including some invalid input
GO_FRAGMENTS = [
    "package main\n",
    "import \"fmt\"\n",
    "// Compute returns the running total.\n",
    "/* block\n   comment */\n",
    "func Compute(n int) float64 {\n",
    "\tfor i := 0; i <= n; i++ {\n",
    "\t\ttotal = total + 1.5e-3 * float64(i)\n",
    "\t}\n",
    "\tmask := 0xFF && flags != 0\n",
    "\tname := \"gopher \\\"quoted\\\"\"\n",
    "\tr := 'x'\n",
    "\treturn total\n",
    "}\n",
    "#pragma once\n",
    "\tweird := a @ b\n",
]


@dataclass
class BenchmarkResult:
    """Results from a single benchmark run."""
    config_name: str
    source_chars: int
    token_count: int
    execution_time_ms: float
    memory_usage_mb: float

    @property
    def tokens_per_second(self) -> float:
        return self.token_count / (self.execution_time_ms / 1000) if self.execution_time_ms else 0.0


class LexerBenchmark:
    """Tokenizes synthetic sources with one or more lexer configurations."""

    def __init__(self, seed: int = 42):
        self.rng = np.random.default_rng(seed)
        self.last_memory_usage = 0.0

    def generate_source(self, fragment_count: int) -> str:
        indices = self.rng.integers(0, len(GO_FRAGMENTS), size=fragment_count)
        return "".join(GO_FRAGMENTS[i] for i in indices)

    @contextmanager
    def _memory_tracker(self):
        """Track RSS growth while the block runs."""
        process = psutil.Process()
        start_memory = process.memory_info().rss / (1024**2)  # MB
        try:
            yield
        finally:
            end_memory = process.memory_info().rss / (1024**2)  # MB
            self.last_memory_usage = end_memory - start_memory

    def benchmark_config(self, name: str, config: LexerConfig, source: str) -> BenchmarkResult:
        gc.collect()

        with self._memory_tracker():
            start_time = time.perf_counter()
            tokens = Lexer(source, config=config).tokenize()
            end_time = time.perf_counter()

        return BenchmarkResult(
            config_name=name,
            source_chars=len(source),
            token_count=len(tokens),
            execution_time_ms=(end_time - start_time) * 1000,
            memory_usage_mb=self.last_memory_usage
        )

    def run(self, fragment_count: int, configs, num_runs: int = 5) -> List[BenchmarkResult]:
        source = self.generate_source(fragment_count)
        print(f"\n🚀 Source: {fragment_count} fragments, {len(source)} characters")
        print("=" * 60)

        results = []
        for name, config in configs:
            runs = [self.benchmark_config(name, config, source) for _ in range(num_runs)]
            times = np.array([r.execution_time_ms for r in runs])
            rates = np.array([r.tokens_per_second for r in runs])

            print(f"📊 {name:<22} {np.mean(times):8.2f} ± {np.std(times):6.2f} ms   "
                  f"{np.median(rates):12.0f} tokens/s   "
                  f"{max(r.memory_usage_mb for r in runs):6.2f} MB")
            results.extend(runs)
        return results


def main():
    print("golex Lexer Throughput Benchmark")
    print("=" * 50)
    print(f"CPU: {platform.processor() or 'Unknown CPU'}")
    print(f"Memory: {psutil.virtual_memory().total / (1024**3):.1f} GB")
    print(f"Python: {platform.python_version()}  NumPy: {np.__version__}")

    extended = DEFAULT_CONFIG.insert_before(
        RecognizerRule.compile(TokenType.OPERATOR, r':=|<-|/='), TokenType.COMMENT
    )
    configs = [("default table", DEFAULT_CONFIG), ("extended operators", extended)]

    benchmark = LexerBenchmark()
    for fragment_count in (100, 1_000, 10_000):
        benchmark.run(fragment_count, configs)

    print("\n🏁 Benchmark Complete!")


if __name__ == "__main__":
    main()
