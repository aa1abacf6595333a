"""
Copyright (c) 2015 Genome Research Ltd.

Permission is hereby granted, free of charge, to any person obtaining a copy of
this software and associated documentation files (the "Software"), to deal in
the Software without restriction, including without limitation the rights to
use, copy, modify, merge, publish, distribute, sublicense, and/or sell copies
of the Software, and to permit persons to whom the Software is furnished to do
so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY, FITNESS
FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR
COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER
IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.
"""

import random
import unittest

from wordpredictor.errors import InvalidDistribution
from wordpredictor.validation import validate
from wordpredictor.weighted_choice import WeightedChoice
from wordpredictor.word_probability import WordProbability

def make_choices(pairs):
    return WeightedChoice([WordProbability(*x) for x in pairs])

def random_entries(rng, final=1.0):
    ''' make a valid list of entries, with random cumulative probabilities
    '''
    size = rng.randint(1, 20)
    probs = sorted(set(x for x in (rng.random() for _ in range(size - 1)) if 0 < x < final))
    probs.append(final)
    return [WordProbability(f'word_{i}', x) for i, x in enumerate(probs)]

class TestWeightedChoicePy(unittest.TestCase):
    """ unit test the WeightedChoice class
    """
    
    def setUp(self):
        self.choices = make_choices([('cat', 0.1), ('dog', 0.5), ('lizard', 1.0)])
    
    def test___init__(self):
        """ check that __init__() initiates the object correctly
        """
        
        self.assertEqual(self.choices.words, ('cat', 'dog', 'lizard'))
        self.assertEqual(self.choices.cum_probs, (0.1, 0.5, 1.0))
        self.assertEqual(len(self.choices), 3)
        
        # an object without any possible choices can't be constructed
        with self.assertRaises(InvalidDistribution):
            WeightedChoice([])
    
    def test_select(self):
        """ check that select() finds the word for a target value
        """
        
        self.assertEqual(self.choices.select(0.05), 'cat')
        self.assertEqual(self.choices.select(0.3), 'dog')
        self.assertEqual(self.choices.select(0.8), 'lizard')
        
        # targets exactly on a cumulative probability belong to that word
        self.assertEqual(self.choices.select(0.1), 'cat')
        self.assertEqual(self.choices.select(0.5), 'dog')
        
        # and anything just above moves to the next word
        self.assertEqual(self.choices.select(0.1000001), 'dog')
        self.assertEqual(self.choices.select(0.5000001), 'lizard')
    
    def test_select_boundaries(self):
        """ check select() at the ends of the [0, 1) range
        """
        
        self.assertEqual(self.choices.select(0.0), 'cat')
        self.assertEqual(self.choices.select(0.9999), 'lizard')
        
        # single entry lists always give the same word
        single = make_choices([('sat', 1.0)])
        for target in [0.0, 0.25, 0.5, 0.9999]:
            self.assertEqual(single.select(target), 'sat')
        
        # a final probability slightly below one still covers the top of the
        # range
        short = make_choices([('cat', 0.1), ('dog', 0.9995)])
        self.assertEqual(short.select(0.9997), 'dog')
        self.assertEqual(short.scan(0.9997), 'dog')
    
    def test_select_matches_scan(self):
        """ check that the binary search agrees with the linear scan
        """
        
        rng = random.Random(1)
        for _ in range(500):
            final = rng.choice([1.0, 0.9995, 1.001])
            entries = random_entries(rng, final)
            validate({'the': entries})
            choices = WeightedChoice(entries)
            
            # check random targets, plus targets on and around each boundary
            targets = [rng.random() for _ in range(50)] + [0.0]
            for prob in choices.cum_probs:
                targets += [prob, prob - 1e-12, prob + 1e-12]
            targets = [x for x in targets if 0.0 <= x < 1.0]
            
            for target in targets:
                self.assertEqual(choices.select(target), choices.scan(target))
    
    def test_choice(self):
        """ test that choice() works correctly.
        
        Since WeightedChoice is a weighted random sampler, we can't rely on
        getting exact values out, so repeated samples are expected to obtain
        proportions of values equivalent to their probabilities. The random
        number generator is seeded, so the test is repeatable.
        """
        
        iterations = 100000
        rng = random.Random(1234)
        s = [ self.choices.choice(rng) for x in range(iterations) ]
        self.assertAlmostEqual(s.count('cat')/len(s), 0.1, delta=0.01)
        self.assertAlmostEqual(s.count('dog')/len(s), 0.4, delta=0.01)
        self.assertAlmostEqual(s.count('lizard')/len(s), 0.5, delta=0.01)
        
        # check that all the choices have been made from the inserted values
        self.assertEqual(set(s), set(['cat', 'dog', 'lizard']))
    
    def test_choice_small_numbers(self):
        """ test that choice() works correctly for very unlikely words
        """
        
        iterations = 100000
        rng = random.Random(5)
        
        # very small probabilities at the start still have expected proportions
        choices = make_choices([('cat', 0.0001), ('dog', 0.5), ('lizard', 1.0)])
        s = [ choices.choice(rng) for x in range(iterations) ]
        self.assertAlmostEqual(s.count('cat')/len(s), 0.0001, places=3)
        
        # and at the end
        choices = make_choices([('cat', 0.5), ('dog', 0.9999), ('lizard', 1.0)])
        s = [ choices.choice(rng) for x in range(iterations) ]
        self.assertAlmostEqual(s.count('lizard')/len(s), 0.0001, places=3)
    
    def test_probabilities(self):
        """ check that probabilities() gives the gap between cumulative values
        """
        
        probs = self.choices.probabilities()
        self.assertEqual([x[0] for x in probs], ['cat', 'dog', 'lizard'])
        for (_, prob), expected in zip(probs, [0.1, 0.4, 0.5]):
            self.assertAlmostEqual(prob, expected)
