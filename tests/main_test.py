import io
import os
import shutil
import tempfile
import unittest
from contextlib import redirect_stdout

from fnc import demo
from fnc.frontend import parse_source
from fnc.lang.tree import Call, Let, Name, Type
from fnc.main import main


class MainTestCase(unittest.TestCase):

    def setUp(self):
        self.tmp_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmp_dir)

    def write(self, source):
        path = os.path.join(self.tmp_dir, "prog.fn")
        with open(path, "w", encoding="utf-8") as file:
            file.write(source)
        return path

    def run_main(self, *argv):
        out = io.StringIO()
        with redirect_stdout(out):
            main(list(argv))
        return out.getvalue()

    def test_valid_file(self):
        output = self.run_main(self.write("fn f(a: Int, b: Int) { return a; }"))
        self.assertIn("Module(name='main', functions=[", output)
        self.assertIn("ArgumentDefinition(name='b', type=Int)", output)
        self.assertNotIn("EndOfFile", output)

    def test_tokens_flag(self):
        output = self.run_main(self.write("fn f() {}"), "--tokens")
        self.assertTrue(output.startswith("[Fn, Name('f'), LeftParen, RightParen, LeftBrace, RightBrace, EndOfFile]\n"))

    def test_invalid_file_exits_1(self):
        should_exit = ["fn f(a: Bool) { }", "fn main() { let x: Int = 5 }", "fn main() { return 4294967296; }"]
        for case in should_exit:
            with self.assertRaises(SystemExit, msg=case) as context:
                self.run_main(self.write(case))
            self.assertEqual(1, context.exception.code, case)

    def test_undecodable_file(self):
        path = os.path.join(self.tmp_dir, "latin1.fn")
        with open(path, "wb") as file:
            file.write(b"fn main() { print_int(1); } # caf\xe9")

        output = self.run_main(path)
        self.assertIn("Print(Int(1))", output)
        self.assertNotIn("[internal]", output)

    def test_missing_file_exits_1(self):
        with self.assertRaises(SystemExit) as context:
            self.run_main(os.path.join(self.tmp_dir, "missing.fn"))
        self.assertEqual(1, context.exception.code)


class FrontendTestCase(unittest.TestCase):

    def test_parse_source(self):
        module = parse_source(demo.SAMPLE)
        function, = module.functions
        self.assertEqual("main", function.name)
        self.assertEqual([], function.args)
        self.assertEqual(4, len(function.body))
        self.assertEqual(Let("z", Type.INT, Call("add", [Name("x"), Name("y")])), function.body[2])

    def test_demo(self):
        out = io.StringIO()
        with redirect_stdout(out):
            demo.main()

        output = out.getvalue()
        self.assertIn("print_int(z);", output)
        self.assertIn("[Fn, Name('main'), LeftParen", output)
        self.assertIn("Print(Name('z'))", output)


if __name__ == '__main__':
    unittest.main()
