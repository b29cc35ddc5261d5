"""Query operators: table wrapper, table lookup, table scan and printing."""