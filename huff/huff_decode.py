import argparse
import os
from huff_bitpack import BitReader, BitWriter
from huff_codec import decompress

def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--input", required=True, help="path to .hf")
    ap.add_argument("--output", required=True, help="path to decompressed file")
    ap.add_argument("--debug", type=int, default=0, help="diagnostic level (1=summary)")
    args = ap.parse_args(argv)

    with open(args.input, "rb") as f:
        data = f.read()

    bw = BitWriter()
    decompress(BitReader(data), bw, debug=args.debug)
    out = bw.getvalue()

    os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
    with open(args.output, "wb") as f:
        f.write(out)

    print(f"[decode] wrote {args.output} ({len(out)} bytes)")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
