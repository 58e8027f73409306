import argparse
import os
from huff_bitpack import BitReader, BitWriter
from huff_codec import compress
from huff_metrics import compression_ratio, bits_per_byte

def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--input", required=True, help="path to any file")
    ap.add_argument("--output", required=True, help="path to .hf")
    ap.add_argument("--debug", type=int, default=0, help="diagnostic level (1=summary, 4=codes)")
    args = ap.parse_args(argv)

    with open(args.input, "rb") as f:
        data = f.read()

    bw = BitWriter()
    stats = compress(BitReader(data), bw, debug=args.debug)
    out = bw.getvalue()

    os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
    with open(args.output, "wb") as f:
        f.write(out)

    print(f"[encode] wrote {args.output}")
    print(f"[encode] {len(data)} -> {len(out)} bytes, leaves={stats['leaves']}")
    if data:
        print(f"[encode] ratio={compression_ratio(len(data), len(out)):.3f}, "
              f"bpb={bits_per_byte(len(data), len(out)):.3f}")
        print(f"[encode] entropy={stats['entropy']:.3f}, "
              f"mean_code_len={stats['mean_code_len']:.3f} bits/symbol")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
