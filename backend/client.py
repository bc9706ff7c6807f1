# backend/client.py
import os
import requests

API = os.environ.get("BASE_URL", "http://localhost:3000") + "/api"

def test_health():
    r = requests.get(f"{API}/health")
    print("Health:", r.status_code, r.json())

def test_create_user():
    payload = {"username": "jsmith", "first_name": "John", "last_name": "Smith"}
    r = requests.post(f"{API}/users", json=payload)
    print("Create user:", r.status_code, r.json())
    return r.json().get("id")

def test_list_users():
    r = requests.get(f"{API}/users", params={"limit": 10, "page": 1})
    print("List users:", r.status_code, r.json())

def test_task_lifecycle(user_id):
    payload = {
        "name": "My task",
        "description": "Description of task",
        "date_time": "2016-05-25 14:25:00",
    }
    r = requests.post(f"{API}/users/{user_id}/tasks", json=payload)
    print("Create task:", r.status_code, r.json())
    task_id = r.json().get("id")

    r = requests.put(f"{API}/users/{user_id}/tasks/{task_id}", json={"name": "My updated task"})
    print("Update task:", r.status_code, r.json())

    r = requests.get(f"{API}/users/{user_id}/tasks/{task_id}")
    print("Get task:", r.status_code, r.json())

    r = requests.delete(f"{API}/users/{user_id}/tasks/{task_id}")
    print("Delete task:", r.status_code)

if __name__ == "__main__":
    print("--- Testing taskboard API ---")
    test_health()
    uid = test_create_user()
    test_list_users()
    if uid:
        test_task_lifecycle(uid)
