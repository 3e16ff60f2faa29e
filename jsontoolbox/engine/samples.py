"""Sample documents loaded by each view's "Load Sample" action."""

COMPARE_SAMPLE_LEFT = """{
  "name": "John Doe",
  "age": 30,
  "email": "john@example.com",
  "address": {
    "street": "123 Main St",
    "city": "New York",
    "zipCode": "10001"
  },
  "hobbies": ["reading", "swimming"],
  "isActive": true
}"""

COMPARE_SAMPLE_RIGHT = """{
  "name": "John Doe",
  "age": 31,
  "email": "john.doe@example.com",
  "address": {
    "street": "123 Main St",
    "city": "New York",
    "zipCode": "10001",
    "country": "USA"
  },
  "hobbies": ["reading", "cycling"],
  "phone": "+1-555-0123",
  "isActive": true
}"""

FORMAT_SAMPLE = (
    '{"name":"John Doe","age":30,"email":"john@example.com","isActive":true,'
    '"address":{"street":"123 Main St","city":"New York","zipCode":"10001",'
    '"coordinates":{"lat":40.7128,"lng":-74.0060}},'
    '"hobbies":["reading","swimming","coding"],'
    '"profile":{"bio":"Software developer with 5+ years experience",'
    '"skills":["JavaScript","React","Node.js","Python"],'
    '"social":{"twitter":"@johndoe","linkedin":"john-doe-123"}}}'
)

TEXT_SAMPLE_LEFT = """function calculateTotal(items) {
  let total = 0;
  for (let i = 0; i < items.length; i++) {
    total += items[i].price;
  }
  return total;
}

// Usage
const items = [
  { name: 'Apple', price: 1.50 },
  { name: 'Banana', price: 0.75 },
  { name: 'Orange', price: 2.00 }
];

console.log(calculateTotal(items));"""

TEXT_SAMPLE_RIGHT = """function calculateTotal(items) {
  let total = 0;
  for (const item of items) {
    total += item.price * item.quantity;
  }
  return total;
}

// Usage
const items = [
  { name: 'Apple', price: 1.50, quantity: 2 },
  { name: 'Banana', price: 0.75, quantity: 3 },
  { name: 'Orange', price: 2.00, quantity: 1 },
  { name: 'Grape', price: 3.50, quantity: 1 }
];

console.log('Total:', calculateTotal(items));"""
