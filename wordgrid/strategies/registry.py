from typing import Dict, List


def strategy_defs() -> List[Dict[str, object]]:
    # Keep in sync with the evaluators in strategies.selection.
    return [
        {
            "key": "word",
            "name": "Word Guess",
            "description": "Guesses a whole word once a revealed pattern narrows the word bank enough.",
            "notes": "Preempts the other strategies when its confidence clears 1 - skill * risk. A wrong word costs two misses, so low skill waits for near-certain matches.",
        },
        {
            "key": "letter",
            "name": "Letter Guess",
            "description": "Guesses the unguessed letter with the best frequency plus pattern score.",
            "notes": "Score is English frequency plus 2x the share of pattern-matching bank words that contain the letter. Picks uniformly from a top-K pool sized by skill (1/2/5/10).",
        },
        {
            "key": "coordinate",
            "name": "Coordinate Guess",
            "description": "Guesses the unguessed cell with the best adjacency, line and center score.",
            "notes": "Adjacency to remembered hits counts more on sparse grids; cells 2-3 steps from a hit get a small proximity bonus. Top-K pool sized by skill (1/3/8/15).",
        },
    ]


def strategy_keys() -> List[str]:
    return [str(d["key"]) for d in strategy_defs()]
