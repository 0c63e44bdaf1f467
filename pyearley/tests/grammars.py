from pyearley.grammar import Grammar

G_EXPR = Grammar([ ("E", ("E", "+", "T")),
                   ("E", ("T",)),
                   ("T", ("T", "*", "F")),
                   ("T", ("F",)),
                   ("F", ("(", "E", ")")),
                   ("F", ("id",)),
                 ])

G_EPS = Grammar([ ("A", ()),
                  ("S", ("A", "b")),
                ])

G_LATE_EPS = Grammar([ ("S", ("A", "A", "b")),
                       ("A", ()),
                     ])

G_AMB = Grammar([ ("S", ("S", "S")),
                  ("S", ("a",)),
                ])

G_INDIRECT = Grammar([ ("A", ("B", "x")),
                       ("A", ("y",)),
                       ("B", ("A", "z")),
                     ])

G_CYCLE = Grammar([ ("A", ("A",)),
                    ("A", ("a",)),
                  ])
