"""Atom sources: mass distributions, emission rules, ovens, hot surfaces and gaussian emitters."""