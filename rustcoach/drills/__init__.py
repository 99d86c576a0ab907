"""Worked answers to course exercises: containers, text, records, errors and conversions."""