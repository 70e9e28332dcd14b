"""
Example data generator for FlashFreq.

Creates one synthetic CSV file for demonstration and testing.  The
table mixes column kinds so every analysis path is exercised:

- ``Region`` / ``Product`` — categorical, with skewed frequencies
- ``Quantity`` — integer, numeric
- ``Unit Price`` — decimal, numeric, ~5% of cells blank
- ``Rating`` — numeric-looking with a few stray ``"n/a"`` cells
- ``Comment`` — free text, mostly blank, one value with a comma
  (written quoted)
"""

import csv
import os
import random

EXAMPLE_FILENAME = 'example_sales.csv'
EXAMPLE_ROWS = 500


def generate_example_csv(output_dir: str, n_rows: int = EXAMPLE_ROWS) -> str:
    """Generate the example CSV file in *output_dir*.

    Returns
    -------
    str
        Path of the written file.
    """
    os.makedirs(output_dir, exist_ok=True)

    # Reproducible randomness
    rng = random.Random(42)

    regions = ['North', 'South', 'East', 'West', 'Central']
    region_weights = [35, 25, 20, 15, 5]
    products = [
        'Widget', 'Gadget', 'Doohickey', 'Thingamajig',
        'Extra-Long Product Name Deluxe',
    ]
    comments = ['Repeat customer', 'Late delivery, refunded', 'Gift']

    filepath = os.path.join(output_dir, EXAMPLE_FILENAME)
    with open(filepath, 'w', encoding='utf-8', newline='') as fh:
        writer = csv.writer(fh)
        writer.writerow([
            'Region', 'Product', 'Quantity', 'Unit Price', 'Rating', 'Comment',
        ])

        for _ in range(n_rows):
            region = rng.choices(regions, weights=region_weights)[0]
            product = rng.choice(products)
            quantity = str(rng.randint(1, 20))

            if rng.random() < 0.05:
                price = ''
            else:
                price = f"{rng.uniform(2.0, 150.0):.2f}"

            if rng.random() < 0.03:
                rating = 'n/a'
            else:
                rating = str(rng.randint(1, 5))

            comment = rng.choice(comments) if rng.random() < 0.2 else ''

            writer.writerow([region, product, quantity, price, rating, comment])

    return filepath


if __name__ == '__main__':
    # Quick test: generate to a temporary directory and print summary
    import tempfile
    out_dir = os.path.join(tempfile.gettempdir(), 'flashfreq_example')
    path = generate_example_csv(out_dir)
    print(f"  {path} ({os.path.getsize(path):,} bytes)")
