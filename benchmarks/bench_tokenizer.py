#!/usr/bin/env python3
"""
Shaderpad Benchmark Suite - Tokenizer and Renderer Throughput
"""

import time

from shaderpad import tokenize, render, highlight

THOUSAND = 1_000
HUNDRED = 100

SHADER = """#version 300 es
precision highp float;

uniform sampler2D uTexture;
uniform float uTime;
in vec2 vUv;
out vec4 fragColor;

/* ripple the texture lookup */
void main() {
    vec2 uv = vUv - 0.5;
    float d = length(uv);
    uv += normalize(uv) * sin(d * 40.0 - uTime * 4.0) * 0.01;
    vec4 color = texture(uTexture, uv + 0.5);
    if (d > 0.5) discard;
    fragColor = mix(color, vec4(1.0, 0.8, 0.6, 1.0), smoothstep(0.3, 0.5, d)); // vignette
}
"""

def now_ms():
    return time.perf_counter() * 1000

# 1. Tokenize a small shader many times
def bench_tokenize_small():
    N = 10 * THOUSAND
    start = now_ms()
    count = 0
    for i in range(N):
        count += len(tokenize(SHADER))
    end = now_ms()
    print(f"1. Tokenize small (1e4):  {end - start:8.2f} ms  (tokens={count})")

# 2. Tokenize one large source
def bench_tokenize_large():
    source = SHADER * THOUSAND
    start = now_ms()
    tokens = tokenize(source)
    end = now_ms()
    print(f"2. Tokenize large (1e3x): {end - start:8.2f} ms  (tokens={len(tokens)})")

# 3. Render a pre-tokenized list
def bench_render():
    tokens = tokenize(SHADER * HUNDRED)
    start = now_ms()
    for i in range(HUNDRED):
        markup = render(tokens)
    end = now_ms()
    print(f"3. Render (1e2):          {end - start:8.2f} ms  (len={len(markup)})")

# 4. Full pipeline, once per simulated keystroke
def bench_keystrokes():
    start = now_ms()
    markup = ""
    for i in range(1, len(SHADER) + 1):
        markup = highlight(SHADER[:i])
    end = now_ms()
    print(f"4. Keystrokes ({len(SHADER)}):      {end - start:8.2f} ms  (len={len(markup)})")

# 5. Worst case: unmatched symbols fall back one char at a time
def bench_unknown():
    source = "§@$`" * (10 * THOUSAND)
    start = now_ms()
    tokens = tokenize(source)
    end = now_ms()
    print(f"5. Unknown chars (4e4):   {end - start:8.2f} ms  (tokens={len(tokens)})")

if __name__ == "__main__":
    print("=== Shaderpad Benchmark Suite ===\n")

    bench_tokenize_small()
    bench_tokenize_large()
    bench_render()
    bench_keystrokes()
    bench_unknown()

    print("\n=== Done ===")
