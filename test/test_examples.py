#! /usr/bin/python3

#  ++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++  #
#  This file is part of rangekit (interval algebra over ordered domains in Python)               #
#  Copyright © 2020 The rangekit authors.                                                        #
#                                                                                                #
#  This program is free software: you can redistribute it and/or modify it under the terms of    #
#  the GNU General Public License as published by the Free Software Foundation, either version   #
#  3 of the License, or (at your option) any later version.                                      #
#                                                                                                #
#  This program is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY;     #
#  without even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.     #
#  See the GNU General Public License for more details.                                          #
#                                                                                                #
#  You should have received a copy of the GNU General Public License along with this program.    #
#  If not, see <http://www.gnu.org/licenses/>.                                                   #
#  ++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++++  #

"""
Runs each script in example_tests and compares the string form of everything its test_results() function returns
against the results saved alongside it in a JSON file of the same name. Run directly with "-s" to re-save the
results after an intentional change; run directly without arguments, or through pytest, to check them.
"""

import rangekit
import importlib.util
import os
import json
import sys
import pytest
from difflib import Differ

START_RED_TEXT = '\033[91m'
STOP_RED_TEXT = '\033[0m'

# number of unaltered lines before and after it shows in the diff
NUM_DIFF_CONTEXT_LINES = 2


example_test_directory = os.path.join(os.path.dirname(os.path.abspath(__file__)), "example_tests")

examples = sorted(
    os.path.join(dp, f)
    for dp, dn, filenames in os.walk(example_test_directory)
    for f in filenames if os.path.splitext(f)[1] == '.py'
)


def import_module(python_file_path):
    spec = importlib.util.spec_from_file_location("example_module", python_file_path)
    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)
    return mod


def diff_comparison(a, b, num_context_lines=NUM_DIFF_CONTEXT_LINES):
    if a == b:
        return True
    diff = Differ().compare(a.splitlines(True), b.splitlines(True))
    processed_diff = []
    normal_buffer = []  # buffer of unchanged lines (don't want to print them all)
    for line in diff:
        if line.startswith(" "):  # normal line
            normal_buffer.append(line)
        else:
            if len(normal_buffer) > 2 * num_context_lines + 1:
                if len(processed_diff) > 0:
                    processed_diff.append(normal_buffer[0])
                processed_diff.append("...\n")
                processed_diff.extend(normal_buffer[-num_context_lines:])
            else:
                processed_diff.extend(normal_buffer)
            normal_buffer.clear()
            processed_diff.append(line)

    if len(normal_buffer) > num_context_lines:
        processed_diff.extend(normal_buffer[:num_context_lines])
        processed_diff.append("...\n")
    else:
        processed_diff.extend(normal_buffer)
    return "Differences found:\n" + "".join(processed_diff)


def get_example_result(python_file_path):
    # examples assume factory formatting
    rangekit.formatting_settings.restore_factory_defaults()
    mod = import_module(python_file_path)
    return [str(raw_result) for raw_result in mod.test_results()]


def save_example_result(python_file_path):
    json_path = python_file_path.replace(".py", ".json")
    with open(json_path, 'w') as fp:
        json.dump(get_example_result(python_file_path), fp, indent=4)


def check_example_result(python_file_path):
    json_path = python_file_path.replace(".py", ".json")
    if not os.path.exists(json_path):
        return START_RED_TEXT + "FAILED: No saved result" + STOP_RED_TEXT
    with open(json_path, 'r') as fp:
        saved_results = json.load(fp)
    new_results = get_example_result(python_file_path)
    if len(new_results) != len(saved_results):
        return f"{START_RED_TEXT}Mismatched number of results: {len(saved_results)} saved, " \
               f"but {len(new_results)} new.{STOP_RED_TEXT}"

    result_comparisons = [
        diff_comparison(saved_result, new_result)
        for saved_result, new_result in zip(saved_results, new_results)
    ]

    if all(x is True for x in result_comparisons):
        return True
    return START_RED_TEXT + "\n".join(
        f"FAILED result {i + 1}: \n{result_comparison}"
        for i, result_comparison in enumerate(result_comparisons)
        if result_comparison is not True
    ) + STOP_RED_TEXT


@pytest.mark.parametrize("example_path", examples,
                         ids=lambda path: os.path.relpath(path, example_test_directory))
def test_example_result(example_path):
    result = check_example_result(example_path)
    assert result is True, result


if __name__ == '__main__':
    if len(sys.argv) > 1 and sys.argv[1] == "-s":
        for example_path in examples:
            print("Saving result for {}...".format(example_path))
            save_example_result(example_path)
            print("DONE")
    else:
        total = 0
        successes = 0
        for example_path in examples:
            print("Testing result for {}...".format(example_path))
            example_test_result = check_example_result(example_path)
            if example_test_result is True:
                successes += 1
                print("SUCCESS")
            else:
                print(example_test_result)
            total += 1
            print()
        print('\033[1m' + "{}/{} scripts tested successfully".format(successes, total) + '\033[0m')
